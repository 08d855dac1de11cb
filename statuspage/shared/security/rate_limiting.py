"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-endpoint rate limits.
Protects against denial-of-service and resource abuse.
"""

import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import Response

from statuspage.core.config import settings
from statuspage.interfaces.pages.responses import status_page_response

logger = logging.getLogger(__name__)

HTTP_429 = 429

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.rate_limit_enabled,
)


async def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> Response:
    """Answer rate limit violations with the 429 status page.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A rendered 429 page in the language resolved from the request.
    """
    logger.warning("Rate limit exceeded: %s", exc.detail)
    return status_page_response(request, HTTP_429)
