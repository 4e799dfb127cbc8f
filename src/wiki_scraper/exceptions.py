"""
Custom exceptions for the wiki scraper.
"""

class WikiScraperException(Exception):
    """Base exception for the application."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class WikiServiceUnavailableException(WikiScraperException):
    """Raised when the Wikipedia REST API is unreachable (network, DNS, timeout)."""
    pass

class InvalidPageTitleException(WikiScraperException, ValueError):
    """Raised when a page title cannot be turned into a page identifier."""
    pass
