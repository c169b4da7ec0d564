"""Utilities for data extraction: timestamp parsing, id handling."""

from datetime import datetime


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO-8601 timestamp as written by the tracker.

    Accepts a trailing 'Z', the browser's datetime-local format
    (YYYY-MM-DDTHH:MM), and datetime objects. Returns None for anything
    unparseable.

    Examples:
        >>> parse_timestamp("2026-01-10T18:30:00.000Z").isoformat()
        '2026-01-10T18:30:00+00:00'
        >>> parse_timestamp("not a date") is None
        True
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except (ValueError, TypeError):
        return None


def optional_id(value: object) -> str | None:
    """Return a record id as a string, or None when it's missing."""
    if value is None or value == "":
        return None
    return str(value)
