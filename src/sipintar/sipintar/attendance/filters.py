"""Filtering shared by the history and analysis views.

All functions here are pure: same records and criteria, same result.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, List, Optional

from ..common.datetime_utils import is_unparsed, today_local
from ..core.constants import ALL, LAST_DAYS_WINDOW
from ..core.enums import Period
from .model import AttendanceRecord, FilterCriteria


def matches_search(record: AttendanceRecord, search_text: str) -> bool:
    if not search_text:
        return True
    needle = search_text.lower()
    return (
        needle in record.student_name.lower()
        or search_text in record.student_id
        or needle in record.class_name.lower()
        or search_text in record.date
    )


def matches_class(record: AttendanceRecord, class_filter: str) -> bool:
    return class_filter == ALL or record.class_name == class_filter


def matches_group(record: AttendanceRecord, group_filter: str) -> bool:
    return group_filter == ALL or record.group_name == group_filter


def matches_period(
    record_date: date,
    period: Period,
    *,
    today: date,
    range_start: Optional[date] = None,
    range_end: Optional[date] = None,
) -> bool:
    if period == Period.ALL:
        return True

    if period == Period.CUSTOM_RANGE and range_start is None and range_end is None:
        return True

    if is_unparsed(record_date):
        return False

    if period == Period.TODAY:
        return record_date == today

    if period == Period.LAST_7_DAYS:
        # Lower bound only: records dated after today still pass.
        return record_date >= today - timedelta(days=LAST_DAYS_WINDOW)

    if period == Period.THIS_MONTH:
        return record_date.month == today.month and record_date.year == today.year

    if period == Period.CUSTOM_RANGE:
        if range_start is not None and record_date < range_start:
            return False
        if range_end is not None and record_date > range_end:
            return False
        return True

    return True


def filter_records(
    records: Iterable[AttendanceRecord],
    criteria: FilterCriteria,
    *,
    today: Optional[date] = None,
) -> List[AttendanceRecord]:
    """Keep records passing every active predicate, in input order."""
    today = today or today_local()

    out: List[AttendanceRecord] = []
    for r in records:
        if not matches_search(r, criteria.search_text):
            continue
        if not matches_class(r, criteria.class_filter):
            continue
        if not matches_group(r, criteria.group_filter):
            continue
        if not matches_period(
            r.parsed_date,
            criteria.period,
            today=today,
            range_start=criteria.range_start,
            range_end=criteria.range_end,
        ):
            continue
        out.append(r)
    return out


def unique_classes(records: Iterable[AttendanceRecord]) -> List[str]:
    return sorted({r.class_name for r in records})


def unique_groups(records: Iterable[AttendanceRecord], class_filter: str = ALL) -> List[str]:
    """Distinct groups (rombel), limited to ``class_filter`` unless it is "all"."""
    return sorted({r.group_name for r in records if matches_class(r, class_filter)})
