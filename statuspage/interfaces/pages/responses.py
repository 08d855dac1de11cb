"""
HTTP response construction for status pages.

Shared by the page router and the centralized error handlers so that
every page the service emits goes through the same use case.
"""

from fastapi.responses import HTMLResponse
from starlette.requests import Request

from statuspage.application.pages.dtos import RenderPageQuery
from statuspage.core.config import settings
from statuspage.domain.pages.language import resolve_language
from statuspage.interfaces.pages.dependencies import get_render_status_page_use_case

# These statuses cannot carry a body; the page is dropped for them.
BODYLESS_STATUSES = frozenset({204, 304})

ACCEPT_LANGUAGE_HEADER = "accept-language"


def status_page_response(
    request: Request,
    code: int,
    lang: str | None = None,
    accept_language: str | None = None,
) -> HTMLResponse:
    """Render the status page for ``code`` as an HTMLResponse.

    Language inputs default to the request's ``lang`` query parameter
    and Accept-Language header.

    Args:
        request: The incoming request.
        code: Status code to display.
        lang: Explicit language override, if already extracted.
        accept_language: Accept-Language value, if already extracted.

    Returns:
        An HTML response carrying the clamped transport status.
    """
    if lang is None:
        lang = request.query_params.get("lang")
    if accept_language is None:
        accept_language = request.headers.get(ACCEPT_LANGUAGE_HEADER)

    language = resolve_language(lang, accept_language)
    rendered = get_render_status_page_use_case().execute(
        RenderPageQuery(
            code=code,
            lang=language.value,
            contact_email=settings.contact_email,
            footer=settings.footer_text,
        )
    )

    content = "" if rendered.status_code in BODYLESS_STATUSES else rendered.html
    return HTMLResponse(
        content=content,
        status_code=rendered.status_code,
        headers={"Content-Language": rendered.language},
    )
