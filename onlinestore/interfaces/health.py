"""
Health check router.

Liveness and readiness probes. No business logic.
"""

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
    services: list[str]


class AliveResponse(BaseModel):
    """Response schema for the liveness endpoint."""

    status: str


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and mounted services.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    services = list(getattr(request.app.state, "services", ()))
    return HealthResponse(status="ok", version=request.app.version, services=services)


@router.get("/alive", response_model=AliveResponse, summary="Liveness check")
def alive() -> AliveResponse:
    """Return OK while the process can serve requests."""
    return AliveResponse(status="ok")
