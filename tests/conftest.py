"""
Pytest configuration and shared fixtures.
"""

import logging
from typing import Dict, Iterable, List, Optional

import pytest

from wiki_scraper.capabilities.page_source import IPageFetcher
from wiki_scraper.config import ScraperConfig
from wiki_scraper.exceptions import WikiServiceUnavailableException
from wiki_scraper.models import FetchedPage
from wiki_scraper.wikipedia.extraction import SoupPageExtractor

# Configure logging for tests
logging.basicConfig(level=logging.INFO)


def wikilink(target: str, text: Optional[str] = None) -> str:
    """A Parsoid-style article link."""
    return f'<a rel="mw:WikiLink" href="./{target}" title="{target}">{text or target}</a>'


def article_html(body: str, infobox: str = "") -> str:
    """Wrap paragraph markup the way the REST API does: paragraphs inside sections."""
    return (
        "<!DOCTYPE html><html><head><title>Article</title></head><body>"
        '<section data-mw-section-id="0">'
        f'<table class="infobox"><tr><td>{infobox}</td></tr></table>'
        f"{body}"
        "</section></body></html>"
    )


def link_page(links: Iterable[str]) -> str:
    """An article whose single paragraph contains ``links`` in order."""
    anchors = " and ".join(wikilink(target) for target in links)
    return article_html(f"<p>This article links to {anchors}.</p>")


class FakePageFetcher(IPageFetcher):
    """In-memory page source; unknown titles do not exist."""

    def __init__(self, pages: Dict[str, str], failing: Iterable[str] = ()):
        self.pages = pages
        self.failing = set(failing)
        self.fetch_calls: List[str] = []

    def fetch_page(self, page_title: str) -> FetchedPage:
        self.fetch_calls.append(page_title)
        url = f"https://test.invalid/{page_title}"
        if page_title in self.failing:
            raise WikiServiceUnavailableException(f"Wikipedia API request failed for '{page_title}': timed out")
        if page_title not in self.pages:
            return FetchedPage(title=page_title, url=url, exists=False, status_code=404)
        return FetchedPage(title=page_title, url=url, html=self.pages[page_title], status_code=200)


@pytest.fixture
def extractor() -> SoupPageExtractor:
    return SoupPageExtractor()


@pytest.fixture
def config() -> ScraperConfig:
    return ScraperConfig()


@pytest.fixture
def link_graph() -> Dict[str, str]:
    """A small article graph: Science -> Knowledge -> Philosophy, plus a loop."""
    return {
        "Science": link_page(["Help:IPA", "Knowledge", "Physics"]),
        "Knowledge": link_page(["Philosophy"]),
        "Philosophy": link_page(["Reason"]),
        "Loop_A": link_page(["Loop_B"]),
        "Loop_B": link_page(["Loop_A"]),
        "Narcissus": link_page(["Narcissus"]),
        "Stub": article_html("<p>No links here.</p>"),
        "Broken_link": link_page(["Missing_article"]),
    }


@pytest.fixture
def fetcher(link_graph: Dict[str, str]) -> FakePageFetcher:
    return FakePageFetcher(link_graph)


@pytest.fixture
def make_link_page():
    return link_page


@pytest.fixture
def make_article():
    return article_html


@pytest.fixture
def make_fetcher():
    return FakePageFetcher
