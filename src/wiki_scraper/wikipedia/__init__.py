"""
Wikipedia module for the wiki scraper.

Fetching article HTML from the REST API and extracting its body content.
"""

from .rest_service import LiveRestWikiService
from .extraction import SoupPageExtractor

__all__ = [
    'LiveRestWikiService',
    'SoupPageExtractor',
]
