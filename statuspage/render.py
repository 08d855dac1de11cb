"""
Programmatic rendering entry point.

``render(code, lang)`` returns the transport status and the HTML body
without going through HTTP, using the default template adapter.
"""

from statuspage.application.pages.dtos import RenderPageQuery
from statuspage.interfaces.pages.dependencies import get_render_status_page_use_case


def render(code: int, lang: str | None) -> tuple[int, str]:
    """Render the status page for ``code`` in ``lang``.

    Args:
        code: Any integer status code.
        lang: ``en`` for English; any other value gives Chinese.

    Returns:
        ``(http_status, html_body)``.
    """
    rendered = get_render_status_page_use_case().execute(
        RenderPageQuery(code=code, lang=lang or "")
    )
    return rendered.status_code, rendered.html
