"""
Centralized error handlers for FastAPI.

Maps framework errors to rendered status pages, so a 405 or an
unexpected failure is answered with the same themed page a visitor
would get from ?code=405 or ?code=500.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from statuspage.interfaces.pages.responses import status_page_response
from statuspage.shared.security.headers import SECURE_HEADERS

logger = logging.getLogger(__name__)

HTTP_500 = 500


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> HTMLResponse:
        """Render the status page for framework-raised HTTP errors."""
        logger.warning("HTTP error %d on %s", exc.status_code, request.url.path)
        response = status_page_response(request, exc.status_code)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected(
        request: Request, exc: Exception
    ) -> HTMLResponse:
        """Catch-all for unexpected errors. Never exposes internals.

        Served outside the middleware stack, so the security headers
        are added here.
        """
        logger.exception("Unexpected error: %s", type(exc).__name__)
        response = status_page_response(request, HTTP_500)
        response.headers.update(SECURE_HEADERS)
        return response
