"""
Body content extraction from Parsoid (REST API) article HTML.
"""

import logging
from typing import List

from bs4 import BeautifulSoup

from wiki_scraper.capabilities.page_source import IPageExtractor

logger = logging.getLogger(__name__)

FOOTNOTE_SELECTOR = "section > p > sup"
PARAGRAPH_SELECTOR = "section > p"
# Infobox, footnote and navbox anchors never sit inside a section's paragraph.
WIKILINK_SELECTOR = "section > p a[rel~='mw:WikiLink']"


class SoupPageExtractor(IPageExtractor):
    """Extracts paragraphs and wikilinks with BeautifulSoup CSS selectors."""

    def __init__(self, features: str = "html.parser"):
        self.features = features

    def parse(self, html: str) -> BeautifulSoup:
        return BeautifulSoup(html, self.features)

    def strip_footnote_markers(self, document: BeautifulSoup) -> None:
        # select() returns a list, so decomposing while iterating is safe
        markers = document.select(FOOTNOTE_SELECTOR)
        for marker in markers:
            marker.decompose()
        logger.debug(f"Removed {len(markers)} footnote markers")

    def paragraph_text(self, document: BeautifulSoup) -> List[str]:
        return [p.get_text() for p in document.select(PARAGRAPH_SELECTOR)]

    def wikilinks(self, document: BeautifulSoup) -> List[str]:
        links = []
        for anchor in document.select(WIKILINK_SELECTOR):
            href = anchor.get("href")
            if not href:
                continue
            # Parsoid hrefs are relative to the article: "./Target#Section"
            target = href[2:] if href.startswith("./") else href
            target = target.split("#", 1)[0]
            if target:
                links.append(target)
        return links
