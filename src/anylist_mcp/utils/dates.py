from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Any, Optional

_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def parse_date(value: Any) -> Optional[date]:
    """Parse a ``YYYY-MM-DD`` string into a date.

    Returns ``None`` for non-strings, anything off the pattern, and days that
    do not exist on the calendar (``2024-02-30``).
    """

    if not isinstance(value, str) or not value:
        return None
    match = _DATE_PATTERN.fullmatch(value)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def to_date_text(value: Any) -> str:
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date):
        return ""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def is_within_range(value: Optional[date], start: Optional[date], end: Optional[date]) -> bool:
    if value is None or start is None or end is None:
        return False
    return start <= value <= end


def today() -> date:
    return date.today()


def add_days(value: date, days: int) -> date:
    return value + timedelta(days=days)


__all__ = ["add_days", "is_within_range", "parse_date", "to_date_text", "today"]
