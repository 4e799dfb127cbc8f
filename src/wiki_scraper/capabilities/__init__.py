from .page_source import IPageFetcher, IPageExtractor

__all__ = ['IPageFetcher', 'IPageExtractor']
