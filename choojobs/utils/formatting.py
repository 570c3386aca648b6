"""
Display helpers shared by templates and download responses.
"""

from datetime import datetime
from typing import Optional


def format_date(value: Optional[datetime], fmt: str = "%b %d, %Y") -> str:
    """Render a timestamp as a short date, or an empty string when missing."""
    if value is None:
        return ""
    return value.strftime(fmt)


def safe_filename(name: str, default: str = "resume") -> str:
    """
    Reduce a name to characters safe for a download filename.
    
    Args:
        name: Original name, e.g. an uploaded resume filename
        default: Fallback when nothing usable remains
        
    Returns:
        Name made of alphanumerics, underscores, dashes and dots
    """
    cleaned = "".join(c for c in name if c.isalnum() or c in (' ', '_', '-', '.')).strip()
    cleaned = cleaned.replace(' ', '_').strip('.')
    return cleaned or default
