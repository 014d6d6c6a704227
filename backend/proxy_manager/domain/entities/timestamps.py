"""Timestamp helpers shared by the domain entities."""

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops the offset on round-trip)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def advance(previous: datetime) -> datetime:
    """Return a timestamp strictly later than ``previous``.

    Two writes in the same clock tick still move ``updated_at`` forward.
    """
    now = utc_now()
    previous = as_utc(previous)
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now
