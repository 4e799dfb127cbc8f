"""
Wiki Scraper - Core Library

Word frequency analysis of Wikipedia articles and first-link walks
between them.
"""

from .analysis import analyze_page
from .models import AnalysisResult, AnalysisStatus, WalkResult, WalkStatus, WordStatistics
from .text import strip_parentheses, count_words, top_n_entries, format_entries
from .walker import FirstLinkWalker

__all__ = [
    'analyze_page',
    'AnalysisResult',
    'AnalysisStatus',
    'WalkResult',
    'WalkStatus',
    'WordStatistics',
    'strip_parentheses',
    'count_words',
    'top_n_entries',
    'format_entries',
    'FirstLinkWalker',
]
