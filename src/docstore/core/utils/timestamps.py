"""UTC normalization and ISO-8601 handling for document timestamps"""

from datetime import datetime, timezone


def to_utc(value: datetime) -> datetime:
    """Return value as an aware UTC datetime. Naive values are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_iso(text: str) -> datetime:
    """Parse an ISO-8601 timestamp (a trailing 'Z' is accepted) into a UTC datetime.

    Raises ValueError on malformed input.
    """
    text = text.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return to_utc(datetime.fromisoformat(text))


def format_iso(value: datetime) -> str:
    """Format a datetime as ISO-8601 in UTC with a 'Z' suffix (e.g. 2023-01-01T10:00:00Z)."""
    return to_utc(value).isoformat().replace("+00:00", "Z")
