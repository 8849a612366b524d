"""Timestamp helpers shared by entities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Interpret a naive datetime as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def next_updated_at(previous: datetime) -> datetime:
    """Refreshed modification time, never earlier than `previous`."""
    return max(utc_now(), ensure_utc(previous))
