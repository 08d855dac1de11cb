"""
Dependency injection for the pages bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
"""

from functools import lru_cache

from statuspage.application.pages.render_page import RenderStatusPageUseCase
from statuspage.infrastructure.pages.jinja_template import JinjaPageTemplateAdapter


@lru_cache(maxsize=1)
def get_render_status_page_use_case() -> RenderStatusPageUseCase:
    """Build RenderStatusPageUseCase once; it holds no mutable state."""
    return RenderStatusPageUseCase(
        template_port=JinjaPageTemplateAdapter(),
    )
