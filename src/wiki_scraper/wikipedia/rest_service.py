import logging
import urllib.parse
from typing import Optional

import httpx

from wiki_scraper.capabilities.page_source import IPageFetcher
from wiki_scraper.config import ScraperConfig
from wiki_scraper.exceptions import WikiServiceUnavailableException
from wiki_scraper.models import FetchedPage


class LiveRestWikiService(IPageFetcher):
    """
    Fetches article HTML from the Wikipedia REST content API.

    The rest_v1 HTML carries the Parsoid metadata (``rel="mw:WikiLink"``,
    ``<section>`` wrappers) that link and paragraph extraction rely on.
    All methods are synchronous; use as a context manager to close the client.
    """
    def __init__(self, config: Optional[ScraperConfig] = None, client: Optional[httpx.Client] = None):
        self.config = config or ScraperConfig()
        self.base_url = self.config.base_url
        self.client = client or httpx.Client(
            timeout=self.config.timeout,
            headers={"User-Agent": self.config.user_agent},
            follow_redirects=True,
        )
        self.logger = logging.getLogger(__name__)

    def __enter__(self) -> "LiveRestWikiService":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self.client.close()

    def page_url(self, page_title: str) -> str:
        # Link targets arrive already percent-encoded; only encode what is left.
        return urllib.parse.urljoin(self.base_url, urllib.parse.quote(page_title, safe="%"))

    def fetch_page(self, page_title: str) -> FetchedPage:
        """Fetch a page's HTML. A non-success status means the page does not exist."""
        url = self.page_url(page_title)
        self.logger.debug(f"GET {url}")
        try:
            response = self.client.get(url)
        except httpx.RequestError as e:
            self.logger.error(f"Failed to fetch page '{page_title}': {e}")
            raise WikiServiceUnavailableException(f"Wikipedia API request failed for '{page_title}': {e}")

        if not response.is_success:
            self.logger.info(f"Page '{page_title}' returned HTTP {response.status_code}")
            return FetchedPage(
                title=page_title,
                url=url,
                exists=False,
                status_code=response.status_code,
            )

        return FetchedPage(
            title=page_title,
            url=url,
            html=response.text,
            exists=True,
            status_code=response.status_code,
        )
