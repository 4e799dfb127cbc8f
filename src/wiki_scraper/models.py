import unicodedata
from typing import List, Dict, Optional
from enum import Enum
from pydantic import BaseModel, Field

# --- Enums ---

class WalkStatus(Enum):
    """Terminal state of a first-link walk."""
    REACHED = "reached"
    CYCLE_DETECTED = "cycle_detected"
    PAGE_NOT_FOUND = "page_not_found"
    DEAD_END = "dead_end"
    STEP_LIMIT_EXCEEDED = "step_limit_exceeded"

class AnalysisStatus(Enum):
    """Outcome of a word analysis."""
    COMPLETED = "completed"
    PAGE_NOT_FOUND = "page_not_found"

# --- Data Models ---

class FetchedPage(BaseModel):
    """Raw HTML of a single Wikipedia page as returned by the REST API."""
    title: str = Field(..., description="The page identifier that was requested.")
    url: str = Field(..., description="The URL the page was fetched from.")
    html: str = Field("", description="The response body. Empty when the page does not exist.")
    exists: bool = Field(True, description="False when the API reported a non-success status.")
    status_code: Optional[int] = Field(None, description="HTTP status code of the response.")

class WordStatistics(BaseModel):
    """Word counts keyed by lowercased word, with every casing seen for that word."""
    word_counts: Dict[str, int] = Field(default_factory=dict, description="Occurrences per lowercased word.")
    word_variants: Dict[str, List[str]] = Field(default_factory=dict, description="Distinct surface forms per lowercased word, first-seen order.")

    def add(self, word: str) -> None:
        """Record one occurrence of ``word``."""
        key = unicodedata.normalize("NFC", word.lower())
        self.word_counts[key] = self.word_counts.get(key, 0) + 1
        variants = self.word_variants.setdefault(key, [])
        if word not in variants:
            variants.append(word)

    @property
    def total_words(self) -> int:
        return sum(self.word_counts.values())

    @property
    def unique_words(self) -> int:
        return len(self.word_counts)

class WordEntry(BaseModel):
    """A ranked word, ready for display."""
    key: str = Field(..., description="The lowercased word.")
    count: int = Field(..., description="Number of occurrences.")
    variants: List[str] = Field(default_factory=list, description="Surface forms in first-seen order.")

    @property
    def label(self) -> str:
        return "/".join(self.variants)

class AnalysisResult(BaseModel):
    """Result of analysing the body text of one page."""
    title: str = Field(..., description="The page identifier that was analysed.")
    status: AnalysisStatus = Field(..., description="Whether the page was found and analysed.")
    statistics: WordStatistics = Field(default_factory=WordStatistics, description="Word statistics of the body text.")
    paragraph_count: int = Field(0, description="Number of body paragraphs the text was taken from.")

class WalkResult(BaseModel):
    """Summarizes the outcome of following first links from a start page."""
    status: WalkStatus = Field(..., description="The terminal state of the walk.")
    start_page: str = Field(..., description="The page the walk started from.")
    target_page: str = Field(..., description="The page the walk was trying to reach.")
    page: Optional[str] = Field(None, description="The page the terminal state refers to.")
    steps: int = Field(0, description="Number of links followed.")
    path: List[str] = Field(default_factory=list, description="Pages visited, in order.")

    def describe(self) -> str:
        """Human-readable narrative of the outcome."""
        if self.status == WalkStatus.REACHED:
            return f"Reached {self.target_page} in {self.steps} clicks!"
        if self.status == WalkStatus.CYCLE_DETECTED:
            return f"Cycle detected: {self.page} was already visited after {self.steps} clicks."
        if self.status == WalkStatus.PAGE_NOT_FOUND:
            return f"Page {self.page} nonexistent!"
        if self.status == WalkStatus.DEAD_END:
            return f"Deadend: No wikilink found on {self.page}"
        return f"Gave up after {self.steps} clicks without reaching {self.target_page}."
