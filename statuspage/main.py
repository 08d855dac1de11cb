"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, then the catch-all status page route)
- Error handlers (framework errors rendered as status pages)
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from statuspage.core.config import settings
from statuspage.interfaces.health import router as health_router
from statuspage.interfaces.pages.router import router as pages_router
from statuspage.shared.errors.handlers import register_error_handlers
from statuspage.shared.logging import configure_logging
from statuspage.shared.security.headers import SecurityHeadersMiddleware
from statuspage.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Routers ---
    # The page route matches every path, so it must be registered last.
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(pages_router)

    return app


app = create_app()
