"""Utility modules."""

from .logger import get_logger, setup_logging
from .formatting import format_date, safe_filename

__all__ = [
    "get_logger",
    "setup_logging",
    "format_date",
    "safe_filename",
]
