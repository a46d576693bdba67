"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas
and dependency wiring. No business logic belongs here.
Routes call use cases and return responses; failures are
mapped by the centralized error handlers.
"""
