from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_record_date
from ..core.constants import ALL
from ..core.enums import AttendanceStatus, Period


@dataclass(frozen=True)
class AttendanceRecord:
    """Entitas domain: satu catatan kehadiran siswa pada satu jam pelajaran."""

    student_id: str
    student_name: str
    class_name: str
    group_name: str
    lesson_hour: str
    status: AttendanceStatus
    date: str
    recorded_by: str

    @property
    def parsed_date(self) -> date:
        return parse_record_date(self.date)

    def to_payload(self) -> dict:
        """Body expected by the Apps Script ``doPost`` handler."""
        return {
            "nisn": self.student_id,
            "name": self.student_name,
            "class": self.class_name,
            "rombel": self.group_name,
            "lessonHour": self.lesson_hour,
            "status": self.status.value,
            "date": self.date,
            "teacherUsername": self.recorded_by,
        }


@dataclass(frozen=True)
class FilterCriteria:
    """User-selected filters for the history and analysis views."""

    class_filter: str = ALL
    group_filter: str = ALL
    search_text: str = ""
    period: Period = Period.ALL
    range_start: Optional[date] = None
    range_end: Optional[date] = None
