"""Timestamp parsing utilities."""
from datetime import datetime, timezone


def parse_timestamp(s: str) -> datetime:
    """
    Parse a provider timestamp string into an aware datetime.

    Supports:
    - ISO format with "Z" suffix: "2024-01-02T09:10:00Z"
    - ISO format with timezone: "2024-01-02T09:10:00+00:00"
    - ISO format without timezone (assumed UTC): "2024-01-02T09:10:00"
    - Space-separated: "2024-01-02 09:10:00"

    Raises:
        ValueError: If the timestamp cannot be parsed
    """
    if not s:
        raise ValueError("Empty timestamp string")

    s = s.strip()

    # Convert trailing "Z" to "+00:00" for ISO format compatibility
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"

    if " " in s and "T" not in s:
        s = s.replace(" ", "T", 1)

    try:
        dt = datetime.fromisoformat(s)
    except ValueError:
        raise ValueError(f"Unable to parse timestamp: {s}") from None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_timestamp(s: str) -> str:
    """Render a timestamp for display, falling back to the raw text."""
    try:
        return parse_timestamp(s).strftime("%Y-%m-%d %H:%M %Z")
    except ValueError:
        return s or "unknown date"
