"""
First-link walker.

Starting from an article, repeatedly follow the first wikilink in the main
text (ignoring parenthesised asides and Help:/Template: pages) until the
target article is reached, a page repeats, a page is missing, a page has no
usable link, or the step ceiling is hit.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from wiki_scraper.capabilities.page_source import IPageFetcher, IPageExtractor
from wiki_scraper.config import ScraperConfig
from wiki_scraper.models import WalkResult, WalkStatus
from wiki_scraper.text.parentheses import strip_parentheses
from wiki_scraper.utils.wiki_helpers import get_page_identifier

logger = logging.getLogger(__name__)


def select_first_link(links: Iterable[str], skipped_namespaces: Sequence[str]) -> Optional[str]:
    """Return the first link that is not in a skipped namespace, or None."""
    prefixes = tuple(skipped_namespaces)
    return next((link for link in links if not link.startswith(prefixes)), None)


class FirstLinkWalker:
    def __init__(
        self,
        fetcher: IPageFetcher,
        extractor: IPageExtractor,
        config: Optional[ScraperConfig] = None,
    ):
        self.fetcher = fetcher
        self.extractor = extractor
        self.config = config or ScraperConfig()

    def walk(self, start_page: str, target_page: Optional[str] = None) -> WalkResult:
        """
        Follow first links from ``start_page`` until a terminal state.

        Raises:
            WikiServiceUnavailableException: If a fetch fails at the transport level.
        """
        start = get_page_identifier(start_page)
        target = get_page_identifier(target_page or self.config.default_target)
        visited: List[str] = []
        steps = 0
        current = start

        logger.info(f"Following first wikilinks from '{start}' to '{target}'")

        def finish(status: WalkStatus, page: Optional[str]) -> WalkResult:
            result = WalkResult(
                status=status,
                start_page=start,
                target_page=target,
                page=page,
                steps=steps,
                path=list(visited),
            )
            logger.info(f"Walk finished: {status.value} after {steps} steps")
            return result

        while True:
            if current == target:
                return finish(WalkStatus.REACHED, current)
            if current in visited:
                return finish(WalkStatus.CYCLE_DETECTED, current)

            logger.info(f"Visiting {current}...")
            page = self.fetcher.fetch_page(current)
            if not page.exists:
                return finish(WalkStatus.PAGE_NOT_FOUND, current)
            visited.append(current)

            next_page = self._first_link(page.html)
            if next_page is None:
                return finish(WalkStatus.DEAD_END, current)
            logger.debug(f"First link on '{current}': '{next_page}'")
            current = next_page

            steps += 1
            if steps >= self.config.max_steps:
                return finish(WalkStatus.STEP_LIMIT_EXCEEDED, None)

    def _first_link(self, html: str) -> Optional[str]:
        document = self.extractor.parse(strip_parentheses(html))
        links = self.extractor.wikilinks(document)
        return select_first_link(links, self.config.skipped_namespaces)
