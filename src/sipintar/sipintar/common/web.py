"""Small helpers shared by the Flask controllers."""

from __future__ import annotations

from functools import wraps
from typing import Mapping

from flask import flash, redirect, session, url_for

from ..attendance.model import AttendanceRecord, FilterCriteria
from ..core.constants import ALL
from ..core.enums import Period
from ..users.model import Teacher
from .datetime_utils import parse_input_date


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "username" not in session:
            flash("Silakan login terlebih dahulu.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def current_teacher() -> Teacher:
    return Teacher(username=session["username"], password="", name=session.get("name", ""))


def criteria_from_args(args: Mapping[str, str]) -> FilterCriteria:
    """Build filter criteria from query/form fields (class, rombel, q, period, start, end)."""
    return FilterCriteria(
        class_filter=args.get("class") or ALL,
        group_filter=args.get("rombel") or ALL,
        search_text=args.get("q") or "",
        period=Period.parse(args.get("period")),
        range_start=parse_input_date(args.get("start") or ""),
        range_end=parse_input_date(args.get("end") or ""),
    )


def criteria_to_args(criteria: FilterCriteria) -> dict:
    return {
        "class": criteria.class_filter,
        "rombel": criteria.group_filter,
        "q": criteria.search_text,
        "period": criteria.period.value,
        "start": criteria.range_start.isoformat() if criteria.range_start else "",
        "end": criteria.range_end.isoformat() if criteria.range_end else "",
    }


def record_to_json(r: AttendanceRecord) -> dict:
    return {
        "nisn": r.student_id,
        "name": r.student_name,
        "class": r.class_name,
        "rombel": r.group_name,
        "lessonHour": r.lesson_hour,
        "status": r.status.value,
        "date": r.date,
        "teacherUsername": r.recorded_by,
    }
