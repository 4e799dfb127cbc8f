"""
Text processing for article HTML and body text.
"""

from .parentheses import strip_parentheses
from .word_count import count_words, top_n_entries, format_entries

__all__ = [
    'strip_parentheses',
    'count_words',
    'top_n_entries',
    'format_entries',
]
