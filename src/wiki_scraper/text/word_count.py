"""
Word frequency counting for article text.

Words are runs of Latin letters (ASCII and Latin-1 Supplement), apostrophes
and hyphens that start with a letter and are at least two characters long.
Counts are keyed by the lowercased word; every distinct casing is kept as a
variant so the report can show e.g. ``The/the``.

Matching is done on the text as given, so a letter followed by combining
marks is one letter and variants keep their exact code points. Keys are
NFC-normalized, so decomposed and precomposed spellings share a count.
"""

import logging
from typing import List, Optional

import regex

from wiki_scraper.models import WordStatistics, WordEntry

logger = logging.getLogger(__name__)

LATIN_LETTERS = "A-Za-zÀ-ÖØ-öø-ÿ"
# A letter is a Latin base character plus any combining marks (one grapheme).
WORD_PATTERN = regex.compile(rf"[{LATIN_LETTERS}]\p{{M}}*(?:[{LATIN_LETTERS}'\-]\p{{M}}*)+")


def iter_words(text: str):
    """Yield word tokens of ``text`` left to right."""
    for match in WORD_PATTERN.finditer(text):
        yield match.group(0)


def count_words(text: str) -> WordStatistics:
    """Count every word in ``text``, grouping casings under the lowercased word."""
    stats = WordStatistics()
    for word in iter_words(text):
        stats.add(word)
    logger.debug(f"Counted {stats.total_words} words ({stats.unique_words} unique)")
    return stats


def top_n_entries(stats: WordStatistics, n: Optional[int] = None) -> List[WordEntry]:
    """
    Return the ``n`` most frequent words, most frequent first.

    Words with equal counts keep the order in which they first appeared in
    the text. ``n=None`` returns every word.
    """
    if n is not None and n < 0:
        raise ValueError(f"Entry count must be non-negative, got {n}")

    # sorted() is stable, so ties stay in first-seen order
    ranked = sorted(stats.word_counts.items(), key=lambda item: item[1], reverse=True)
    if n is not None:
        ranked = ranked[:n]
    return [
        WordEntry(key=key, count=count, variants=list(stats.word_variants.get(key, [key])))
        for key, count in ranked
    ]


def format_entries(entries: List[WordEntry]) -> List[str]:
    """Render entries as ``label: count`` lines with labels right-aligned."""
    if not entries:
        return []
    width = max(len(entry.label) for entry in entries)
    return [f"{entry.label:>{width}}: {entry.count}" for entry in entries]
