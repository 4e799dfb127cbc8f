"""
Helper functions for Wikipedia page title normalization and validation.
"""

from wiki_scraper.exceptions import InvalidPageTitleException


def get_page_identifier(page_title: str) -> str:
    """Validates and returns the page identifier used in REST API paths.

    Args:
      page_title: The page title to validate and normalize.

    Returns:
      The underscore-separated page identifier.

    Examples:
      "Notre Dame Fighting Irish"   =>   "Notre_Dame_Fighting_Irish"
      "  Philosophy "               =>   "Philosophy"
      "Python_(programming_language)" => "Python_(programming_language)"

    Raises:
      InvalidPageTitleException: If the provided page title is invalid.
    """
    validate_page_title(page_title)
    return page_title.strip().replace(' ', '_')


def is_str(val) -> bool:
    """Returns whether or not the provided value is a string type."""
    return isinstance(val, str)


def validate_page_title(page_title: str):
    """Validates the provided value is a valid page title.

    Raises:
      InvalidPageTitleException: If the provided page title is empty or not a string.
    """
    if not is_str(page_title) or not page_title.strip():
        raise InvalidPageTitleException(
            f'Invalid page title "{page_title}" provided. Page title must be a non-empty string.'
        )
