"""
Tests for the pages application layer and its template adapter.

The use case is tested with a fake PageTemplatePort; the Jinja2
adapter is tested against the bundled template.
"""

import re

import pytest

from statuspage.application.pages.dtos import RenderPageQuery
from statuspage.application.pages.render_page import RenderStatusPageUseCase
from statuspage.domain.pages.entities import StatusPage
from statuspage.domain.pages.page import build_status_page
from statuspage.domain.pages.ports import PageTemplatePort
from statuspage.infrastructure.pages.jinja_template import JinjaPageTemplateAdapter


class RecordingTemplate(PageTemplatePort):
    """Template port that records the pages it is asked to render."""

    def __init__(self) -> None:
        self.pages: list[StatusPage] = []

    def render(self, page: StatusPage) -> str:
        self.pages.append(page)
        return f"<html>{page.code}</html>"


@pytest.fixture
def adapter() -> JinjaPageTemplateAdapter:
    return JinjaPageTemplateAdapter()


class TestRenderStatusPageUseCase:
    """Tests for the RenderStatusPageUseCase."""

    def test_delegates_to_template_port(self) -> None:
        template = RecordingTemplate()
        result = RenderStatusPageUseCase(template).execute(
            RenderPageQuery(code=404, lang="en")
        )
        assert result.html == "<html>404</html>"
        assert result.status_code == 404
        assert result.language == "en"
        assert template.pages[0].description == "Not Found"

    def test_informational_code_sent_as_200(self) -> None:
        result = RenderStatusPageUseCase(RecordingTemplate()).execute(
            RenderPageQuery(code=101, lang="zh")
        )
        assert result.status_code == 200
        assert result.language == "zh"

    def test_unsupported_language_renders_chinese(self) -> None:
        template = RecordingTemplate()
        result = RenderStatusPageUseCase(template).execute(
            RenderPageQuery(code=500, lang="de")
        )
        assert result.language == "zh"
        assert template.pages[0].description == "服务器内部错误"

    def test_query_contact_and_footer_reach_the_page(self) -> None:
        template = RecordingTemplate()
        RenderStatusPageUseCase(template).execute(
            RenderPageQuery(code=502, lang="en", contact_email="a@b.c", footer="Foot")
        )
        assert template.pages[0].contact_email == "a@b.c"
        assert template.pages[0].footer == "Foot"


class TestJinjaPageTemplateAdapter:
    """Tests for the Jinja2 HTML template adapter."""

    def test_document_contains_page_fields(self, adapter) -> None:
        html = adapter.render(build_status_page(404, "en"))
        assert html.startswith("<!DOCTYPE html>")
        assert '<html lang="en">' in html
        assert "<title>Error 404</title>" in html
        assert '<div class="error-code">404</div>' in html
        assert '<div class="error-category">Client Error</div>' in html
        assert '<div class="error-description">Not Found</div>' in html

    def test_theme_colors_inlined(self, adapter) -> None:
        page = build_status_page(301, "en")
        html = adapter.render(page)
        assert f"background: {page.theme.background};" in html
        assert f"color: {page.theme.accent};" in html

    def test_self_contained(self, adapter) -> None:
        html = adapter.render(build_status_page(503, "zh"))
        assert "<a " not in html
        assert "<link" not in html
        assert "<script" not in html
        assert "src=" not in html
        assert "http://" not in html and "https://" not in html

    def test_server_error_has_two_controls(self, adapter) -> None:
        html = adapter.render(build_status_page(503, "en", contact_email="ops@example.org"))
        assert html.count('class="contact-button"') == 1
        assert html.count('class="back-button"') == 1
        assert "location.href='mailto:ops@example.org'" in html
        assert ">Contact Admin</button>" in html
        assert ">Go Back</button>" in html

    @pytest.mark.parametrize("code", [100, 200, 302, 404, 499, 600, -3])
    def test_other_codes_have_back_control_only(self, adapter, code: int) -> None:
        html = adapter.render(build_status_page(code, "en"))
        assert 'class="contact-button"' not in html
        assert html.count('onclick="history.back()"') == 1

    def test_chinese_copy(self, adapter) -> None:
        html = adapter.render(build_status_page(500, "zh"))
        assert '<html lang="zh-CN">' in html
        assert "<title>错误 500</title>" in html
        assert ">联系站长</button>" in html
        assert ">返回</button>" in html

    def test_footer_rendered(self, adapter) -> None:
        html = adapter.render(build_status_page(404, "zh", footer="Footer & Co"))
        assert '<div class="footer">Footer &amp; Co</div>' in html

    def test_text_is_escaped(self, adapter) -> None:
        html = adapter.render(build_status_page(418, "en"))
        assert "I&#39;m a teapot" in html

    def test_output_is_deterministic(self, adapter) -> None:
        page = build_status_page(502, "en")
        assert adapter.render(page) == adapter.render(page)
        assert adapter.render(page) == JinjaPageTemplateAdapter().render(page)

    def test_no_unrendered_placeholders(self, adapter) -> None:
        html = adapter.render(build_status_page(404, "en"))
        assert not re.search(r"\{\{|\{%", html)
