"""Time helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so stored timestamps always compare."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def from_millis(value: float) -> datetime:
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


__all__ = ["as_utc", "from_millis", "utcnow"]
