"""Deadline parsing and comparison helpers."""

from __future__ import annotations

from datetime import date, datetime, time

from taskvault.exceptions import ValidationError


def parse_deadline(value: str | date | datetime) -> datetime:
    """Parse a deadline into a datetime.

    Accepts ``datetime``/``date`` objects and ISO-8601 strings such as
    ``2030-01-31``, ``2030-01-31T09:30`` or ``2030-01-31T09:30:00+02:00``.
    A bare date means midnight of that day.

    Raises:
        ValidationError: If the value is not a valid point in time
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str):
        raise ValidationError(f"Invalid deadline: {value!r}")

    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise ValidationError(f"Invalid deadline: {value!r}") from e


def now_like(moment: datetime) -> datetime:
    """Current time, naive or aware to match ``moment``."""
    if moment.tzinfo is None:
        return datetime.now()
    return datetime.now(moment.tzinfo)


def is_past(moment: datetime, now: datetime | None = None) -> bool:
    """Check whether ``moment`` lies before now."""
    if now is None:
        now = now_like(moment)
    return moment < now
