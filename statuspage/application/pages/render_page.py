"""
Use case: Render a localized status page.

Input: RenderPageQuery (code, lang, contact_email, footer)
Output: RenderedPage
Side effects: None.
Failure cases: None. Every integer code and language value renders.
"""

import logging

from statuspage.application.pages.dtos import RenderedPage, RenderPageQuery
from statuspage.domain.pages.catalog import normalize_language
from statuspage.domain.pages.page import build_status_page
from statuspage.domain.pages.ports import PageTemplatePort

logger = logging.getLogger(__name__)


class RenderStatusPageUseCase:
    """Orchestrates status page rendering.

    Builds the domain view model and delegates HTML generation
    to the PageTemplatePort.
    """

    def __init__(self, template_port: PageTemplatePort) -> None:
        self._template_port = template_port

    def execute(self, query: RenderPageQuery) -> RenderedPage:
        """Run the rendering use case.

        Args:
            query: The code and language to render.

        Returns:
            The transport status and HTML document.
        """
        page = build_status_page(
            query.code,
            query.lang,
            contact_email=query.contact_email,
            footer=query.footer,
        )
        logger.debug("Rendering status page code=%s, lang=%s", page.code_text, query.lang)
        html = self._template_port.render(page)

        return RenderedPage(
            status_code=page.transport_status,
            html=html,
            language=normalize_language(query.lang).value,
        )
