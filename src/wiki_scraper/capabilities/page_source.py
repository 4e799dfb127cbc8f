"""
Page Source Capability Interfaces

Defines what the walker and the analysis driver need from the outside world:
raw page HTML, and the body paragraphs and wikilinks inside that HTML. Keeps
the core logic independent of the HTTP client and the HTML parser.
"""

from abc import ABC, abstractmethod
from typing import Any, List

from wiki_scraper.models import FetchedPage


class IPageFetcher(ABC):
    """Fetches the HTML of a page by its identifier."""

    @abstractmethod
    def fetch_page(self, page_title: str) -> FetchedPage:
        """
        Fetch a page.

        Args:
            page_title: The underscore-separated page identifier

        Returns:
            FetchedPage with ``exists=False`` when the page does not exist

        Raises:
            WikiServiceUnavailableException: On network, DNS or timeout failures
        """
        pass


class IPageExtractor(ABC):
    """
    Extracts body content from page HTML.

    Implementations must be total: malformed HTML yields empty sequences,
    never an exception.
    """

    @abstractmethod
    def parse(self, html: str) -> Any:
        """Parse HTML into a document the other methods accept."""
        pass

    @abstractmethod
    def strip_footnote_markers(self, document: Any) -> None:
        """Remove footnote superscripts from body paragraphs, in place."""
        pass

    @abstractmethod
    def paragraph_text(self, document: Any) -> List[str]:
        """Text of each paragraph that is a direct child of a section, in document order."""
        pass

    @abstractmethod
    def wikilinks(self, document: Any) -> List[str]:
        """Target identifiers of article links inside body paragraphs, in document order."""
        pass
