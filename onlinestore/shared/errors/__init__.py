"""
Shared error handling package.

Centralizes failure-to-HTTP mapping so that domain failures
are consistently translated into problem responses.
"""
