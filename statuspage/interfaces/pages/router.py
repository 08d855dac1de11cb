"""
FastAPI router for the pages bounded context.

A single catch-all GET route serves the status page for any path.
All rendering is delegated to the use case. No business logic here.
"""

from fastapi import APIRouter, Header, Query, Request
from fastapi.responses import HTMLResponse

from statuspage.core.config import settings
from statuspage.interfaces.pages.params import parse_status_code
from statuspage.interfaces.pages.responses import status_page_response
from statuspage.shared.security.rate_limiting import limiter

router = APIRouter(tags=["pages"])


@router.get(
    "/{full_path:path}",
    response_class=HTMLResponse,
    summary="Render a status page",
    description=(
        "Render the localized status page for ?code=NNN on any path. "
        "?lang=en|zh overrides Accept-Language detection."
    ),
)
@limiter.limit(settings.rate_limit_default)
def render_status_page(
    request: Request,
    full_path: str,
    code: str | None = Query(default=None, description="Status code to display"),
    lang: str | None = Query(default=None, description="Language override (en or zh)"),
    accept_language: str | None = Header(default=None),
) -> HTMLResponse:
    """Render the status page requested by the query string."""
    status_code = parse_status_code(code, default=settings.default_status_code)
    return status_page_response(
        request,
        status_code,
        lang=lang,
        accept_language=accept_language,
    )
