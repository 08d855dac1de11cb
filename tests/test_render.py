"""
Tests for the programmatic render(code, lang) entry point.
"""

import pytest

from statuspage.render import render


class TestRender:
    """Tests for render()."""

    def test_pure(self) -> None:
        assert render(404, "en") == render(404, "en")
        assert render(999, "zh") == render(999, "zh")

    @pytest.mark.parametrize("code", [400, 401, 403, 404, 500, 502, 503])
    def test_error_codes_sent_verbatim(self, code: int) -> None:
        status, _ = render(code, "en")
        assert status == code

    @pytest.mark.parametrize("code", [100, 150, 199, 99, 0, -404, 600, 999, 10**12])
    def test_unsendable_codes_sent_as_200(self, code: int) -> None:
        status, html = render(code, "en")
        assert status == 200
        assert f'<div class="error-code">{code}</div>' in html

    def test_missing_language_renders_chinese(self) -> None:
        _, html = render(404, None)
        assert "未找到" in html

    def test_code_past_int_string_limit(self) -> None:
        status, html = render(10**5000, "en")
        assert status == 200
        assert f'<div class="error-code">1{"0" * 5000}</div>' in html
        assert f"<title>Error 1{'0' * 5000}</title>" in html

    def test_negative_code_past_int_string_limit(self) -> None:
        status, html = render(-(10**5000), "zh")
        assert status == 200
        assert f'<div class="error-code">-1{"0" * 5000}</div>' in html
