"""
Jinja2 adapter for PageTemplatePort.

Renders the bundled ``status_page.html`` template. The environment is
built once and only read afterwards, so one instance can serve
concurrent requests.
"""

import jinja2

from statuspage.domain.pages.entities import StatusPage
from statuspage.domain.pages.ports import PageTemplatePort

TEMPLATE_PACKAGE = "statuspage"
TEMPLATE_DIR = "templates"
TEMPLATE_FILE = "status_page.html"


def create_jinja_env() -> jinja2.Environment:
    """Create the Jinja2 environment for the bundled templates."""
    loader = jinja2.PackageLoader(TEMPLATE_PACKAGE, TEMPLATE_DIR)
    return jinja2.Environment(
        loader=loader,
        autoescape=jinja2.select_autoescape(["html"]),
        undefined=jinja2.StrictUndefined,
    )


class JinjaPageTemplateAdapter(PageTemplatePort):
    """Renders status pages from a Jinja2 template."""

    def __init__(self, env: jinja2.Environment | None = None) -> None:
        self._env = env or create_jinja_env()
        self._template = self._env.get_template(TEMPLATE_FILE)

    def render(self, page: StatusPage) -> str:
        return self._template.render(page=page, theme=page.theme)
