"""
Data Transfer Objects for the pages application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from statuspage.domain.pages.page import DEFAULT_CONTACT_EMAIL, DEFAULT_FOOTER


@dataclass(frozen=True)
class RenderPageQuery:
    """Input DTO for rendering a status page.

    Attributes:
        code: Status code to display.
        lang: Resolved language tag (``en`` or ``zh``).
        contact_email: mailto target of the 5xx contact control.
        footer: Footer text.
    """

    code: int
    lang: str
    contact_email: str = DEFAULT_CONTACT_EMAIL
    footer: str = DEFAULT_FOOTER


@dataclass(frozen=True)
class RenderedPage:
    """Output DTO for a rendered status page.

    Attributes:
        status_code: HTTP status to send on the wire.
        html: Complete HTML document.
        language: Language the page was rendered in.
    """

    status_code: int
    html: str
    language: str
