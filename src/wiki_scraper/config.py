from typing import List
from pydantic import BaseModel, Field


DEFAULT_REST_BASE_URL = "https://en.wikipedia.org/api/rest_v1/page/html/"


class ScraperConfig(BaseModel):
    """Configuration for fetching pages and walking first links."""

    # HTTP settings
    base_url: str = Field(DEFAULT_REST_BASE_URL, description="REST endpoint that serves article HTML")
    timeout: float = Field(10.0, description="Per-request timeout in seconds")
    user_agent: str = Field(
        "wiki-scraper/0.1 (https://github.com/wiki-scraper/wiki-scraper)",
        description="User-Agent header sent with every request",
    )

    # Walk settings
    max_steps: int = Field(500, gt=0, description="Step ceiling for a first-link walk")
    default_target: str = Field("Philosophy", description="Target page when none is given")
    skipped_namespaces: List[str] = Field(
        default_factory=lambda: ["Help:", "Template:"],
        description="Link prefixes denoting non-article pages",
    )
