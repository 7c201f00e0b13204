from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from ..core.constants import RECORD_DATE_FORMAT

# Stand-in for text that cannot be read as a date; sorts before everything.
EPOCH_DATE = date(1970, 1, 1)


def _to_int(value: str) -> Optional[int]:
    try:
        return int(value.strip())
    except ValueError:
        return None


def build_calendar_date(year: int, month: int, day: int) -> date:
    """Build a date, rolling out-of-range month/day over like a calendar would.

    ``build_calendar_date(2024, 3, 32)`` is 1 April 2024, month 13 is January
    of the next year and day 0 is the last day of the previous month.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return date(year, month, 1) + timedelta(days=day - 1)


def parse_record_date(value: str) -> date:
    """Parse a ``dd/mm/yyyy`` string as stored in the attendance sheet.

    Empty or malformed text gives ``EPOCH_DATE`` instead of raising.
    """
    if not value:
        return EPOCH_DATE

    parts = str(value).split("/")
    if len(parts) != 3:
        return EPOCH_DATE

    day, month, year = (_to_int(p) for p in parts)
    if day is None or month is None or year is None:
        return EPOCH_DATE

    try:
        return build_calendar_date(year, month, day)
    except (ValueError, OverflowError):
        return EPOCH_DATE


def parse_input_date(value: str) -> Optional[date]:
    """Parse YYYY-MM-DD (from a date picker) into date, None when empty."""
    if not value:
        return None

    parts = str(value).split("-")
    if len(parts) != 3:
        return None

    year, month, day = (_to_int(p) for p in parts)
    if year is None or month is None or day is None:
        return None

    try:
        return build_calendar_date(year, month, day)
    except (ValueError, OverflowError):
        return None


def is_unparsed(value: date) -> bool:
    return value == EPOCH_DATE


def format_record_date(value: date) -> str:
    return value.strftime(RECORD_DATE_FORMAT)


def today_local() -> date:
    return now_local().date()


def now_local() -> datetime:
    return datetime.now()
