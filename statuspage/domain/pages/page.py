"""
Status page view model.

Combines catalog lookups and localized copy into a StatusPage,
and decides which HTTP status is actually sent for a code.
"""

from statuspage.domain.pages.catalog import (
    SERVER_ERROR,
    category_of,
    description_of,
    normalize_language,
    theme_of,
)
from statuspage.domain.pages.entities import Language, StatusPage

DEFAULT_CONTACT_EMAIL = "cy@caynet.cn"
DEFAULT_FOOTER = "Copyright cay宸宇"

# Codes in this range are sent as-is; everything else goes out as 200.
TRANSPORT_MIN = 200
TRANSPORT_MAX = 600
FALLBACK_TRANSPORT_STATUS = 200

_CHUNK_DIGITS = 18
_CHUNK = 10 ** _CHUNK_DIGITS

_COPY = {
    Language.EN: {
        "html_lang": "en",
        "title": "Error {code}",
        "back": "Go Back",
        "contact": "Contact Admin",
    },
    Language.ZH: {
        "html_lang": "zh-CN",
        "title": "错误 {code}",
        "back": "返回",
        "contact": "联系站长",
    },
}


def format_code(code: int) -> str:
    """Return the decimal text of ``code``, however many digits it has.

    ``str(int)`` refuses values past the interpreter's digit limit, so the
    value is split into fixed-size chunks that are each formatted on their own.
    """
    value = abs(code)
    chunks = []
    while True:
        value, rest = divmod(value, _CHUNK)
        chunks.append(rest)
        if not value:
            break
    head = str(chunks[-1])
    tail = "".join(f"{chunk:0{_CHUNK_DIGITS}d}" for chunk in reversed(chunks[:-1]))
    sign = "-" if code < 0 else ""
    return sign + head + tail


def transport_status_for(code: int) -> int:
    """Return the HTTP status to send for ``code``.

    Informational codes and anything outside [100, 600) cannot be sent
    as a final response status, so they are reported as 200.
    """
    if TRANSPORT_MIN <= code < TRANSPORT_MAX:
        return code
    return FALLBACK_TRANSPORT_STATUS


def build_status_page(
    code: int,
    lang: str | None,
    contact_email: str = DEFAULT_CONTACT_EMAIL,
    footer: str = DEFAULT_FOOTER,
) -> StatusPage:
    """Build the view model for ``code`` in ``lang``.

    Any language other than ``en`` produces the Chinese copy.
    """
    language = normalize_language(lang)
    copy = _COPY[language]
    code_text = format_code(code)
    return StatusPage(
        code=code,
        transport_status=transport_status_for(code),
        html_lang=copy["html_lang"],
        code_text=code_text,
        title=copy["title"].format(code=code_text),
        category=category_of(code, language),
        description=description_of(code, language),
        theme=theme_of(code),
        back_label=copy["back"],
        contact_label=copy["contact"],
        show_contact=SERVER_ERROR.contains(code),
        contact_email=contact_email,
        footer=footer,
    )
