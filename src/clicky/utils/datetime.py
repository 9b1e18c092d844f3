"""Utilities for datetime handling."""

from datetime import UTC, datetime

DISPLAY_FORMAT = "%Y-%m-%d %H:%M"


def now_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def format_timestamp(dt: datetime) -> str:
    """Format a timestamp for CLI and TUI display."""
    return dt.strftime(DISPLAY_FORMAT)
