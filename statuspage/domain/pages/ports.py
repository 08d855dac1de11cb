"""
Port interfaces (ABCs) for the pages bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod

from statuspage.domain.pages.entities import StatusPage


class PageTemplatePort(ABC):
    """Port for turning a StatusPage view model into an HTML document."""

    @abstractmethod
    def render(self, page: StatusPage) -> str:
        """Return the complete, self-contained HTML document for ``page``.

        Implementations must be deterministic: the same page always
        yields byte-identical output.
        """
        raise NotImplementedError
