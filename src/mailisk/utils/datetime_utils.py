"""Datetime utilities for Mailisk SDK."""

from datetime import datetime, timezone


def to_iso_timestamp(value: datetime) -> str:
    """Format a datetime as an ISO 8601 UTC string.

    Output has millisecond precision and a 'Z' suffix, e.g.
    '2023-01-01T00:00:00.000Z'. Naive datetimes are taken to be UTC.

    Args:
        value: The datetime to format.

    Returns:
        The formatted timestamp string.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
