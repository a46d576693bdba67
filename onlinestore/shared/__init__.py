"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error handling and mapping
- Request tracing
- Security middleware
- Rate limiting
- Logging configuration
"""
