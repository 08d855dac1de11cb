"""
Domain entities for the pages bounded context.

Value objects describing languages, status ranges, color themes
and the page view model. They contain no framework imports and no IO.
"""

from dataclasses import dataclass
from enum import Enum


class Language(str, Enum):
    """Supported page languages. Closed set, no negotiation beyond these."""

    EN = "en"
    ZH = "zh"


@dataclass(frozen=True)
class CategoryRange:
    """A half-open interval [start, end) of status codes.

    Attributes:
        key: Stable identifier used to look up localized labels.
        start: First code in the range (inclusive).
        end: Upper bound of the range (exclusive).
    """

    key: str
    start: int
    end: int

    def contains(self, code: int) -> bool:
        """Return True when ``code`` falls inside this range."""
        return self.start <= code < self.end


@dataclass(frozen=True)
class Theme:
    """Color palette applied to a rendered page."""

    background: str
    card_background: str
    text: str
    accent: str
    hover: str
    shadow: str


@dataclass(frozen=True)
class LanguagePreference:
    """A single parsed Accept-Language entry."""

    tag: str
    weight: float = 1.0


@dataclass(frozen=True)
class StatusPage:
    """Everything the HTML template needs to draw one status page.

    Attributes:
        code: The status code shown in the page body.
        code_text: Decimal text of ``code``, shown verbatim.
        transport_status: The HTTP status actually sent on the wire.
        html_lang: Value of the document ``lang`` attribute.
        title: Document title.
        category: Localized category label.
        description: Localized status description.
        theme: Color palette for the code's range.
        back_label: Label of the "go back" control.
        contact_label: Label of the "contact admin" control.
        show_contact: Whether the contact control is rendered.
        contact_email: mailto target of the contact control.
        footer: Footer text.
    """

    code: int
    code_text: str
    transport_status: int
    html_lang: str
    title: str
    category: str
    description: str
    theme: Theme
    back_label: str
    contact_label: str
    show_contact: bool
    contact_email: str
    footer: str
