"""
Centralized logging configuration for the wiki scraper.
Logs go to stderr so command output on stdout stays clean.
"""

import logging
import sys
from rich.logging import RichHandler
from rich.console import Console

def setup_logging(level: str = "WARNING") -> None:
    """
    Route all package logging through a Rich handler on stderr.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(file=sys.stderr),
        level=numeric_level,
        show_time=True,
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
        log_time_format="[%H:%M:%S]"
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root_logger.addHandler(handler)

    # Set specific logger levels for noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(f"Logging configured: level={level}")
