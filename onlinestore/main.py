"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per enabled bounded context, plus health)
- Error handlers (centralized failure-to-HTTP mapping)
- Trace id and security middleware, rate limiting
- Logging configuration

No business logic belongs here.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from fastapi import APIRouter, FastAPI
from slowapi.errors import RateLimitExceeded

from onlinestore.core.config import ALL_SERVICES, Settings, settings as default_settings
from onlinestore.interfaces.catalog.router import router as catalog_router
from onlinestore.interfaces.customers.router import router as customers_router
from onlinestore.interfaces.health import router as health_router
from onlinestore.interfaces.orders.router import router as orders_router
from onlinestore.interfaces.payments.router import router as payments_router
from onlinestore.shared.errors.handlers import register_error_handlers
from onlinestore.shared.errors.mapper import ErrorMapper
from onlinestore.shared.logging import configure_logging
from onlinestore.shared.security.headers import SecurityHeadersMiddleware
from onlinestore.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler
from onlinestore.shared.tracing import TraceIdMiddleware

logger = logging.getLogger(__name__)

SERVICE_ROUTERS: dict[str, APIRouter] = {
    "catalog": catalog_router,
    "customers": customers_router,
    "orders": orders_router,
    "payments": payments_router,
}


def _resolve_services(services: Optional[Iterable[str]], config: Settings) -> list[str]:
    requested = list(services) if services is not None else list(config.enabled_services)
    unknown = sorted(set(requested) - set(ALL_SERVICES))
    if unknown:
        raise ValueError(
            f"Unknown service(s): {', '.join(unknown)}. "
            f"Expected any of: {', '.join(ALL_SERVICES)}."
        )
    return [name for name in ALL_SERVICES if name in requested]


def create_app(
    config: Optional[Settings] = None,
    services: Optional[Iterable[str]] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Args:
        config: Settings to use. Defaults to the environment settings.
        services: Bounded contexts to mount. Defaults to
            ``config.enabled_services``; pass one name to run a single
            service on its own.

    Returns:
        A fully configured FastAPI application instance.

    Raises:
        ValueError: If an unknown service name is requested.
    """
    config = config or default_settings
    configure_logging(level=config.log_level)
    mounted = _resolve_services(services, config)

    app = FastAPI(
        title=config.project_name,
        version=config.version,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
    )
    app.state.services = mounted

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Error Handlers (catch-all middleware added first, runs innermost) ---
    register_error_handlers(app, ErrorMapper(reveal_details=config.is_development))

    # --- Middleware (last added runs first) ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(TraceIdMiddleware)

    # --- Routers ---
    app.include_router(health_router)
    for name in mounted:
        app.include_router(SERVICE_ROUTERS[name])

    logger.info(
        "Created %s (%s) with services: %s",
        config.project_name,
        config.environment,
        ", ".join(mounted) or "none",
    )
    return app


app = create_app()
