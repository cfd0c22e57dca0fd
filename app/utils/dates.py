"""Date utilities."""

from datetime import datetime, timezone


def to_utc(value: datetime) -> datetime:
    """Normalize a datetime to UTC.

    Naive values are assumed to already be in UTC.

    Args:
        value (datetime): The datetime to normalize.

    Returns:
        datetime: A timezone-aware UTC datetime.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    """Return the current time in UTC.

    Returns:
        datetime: The current timezone-aware UTC datetime.
    """
    return datetime.now(timezone.utc)
