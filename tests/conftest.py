from __future__ import annotations

from datetime import date

import pytest

from src.sipintar.sipintar.attendance.model import AttendanceRecord
from src.sipintar.sipintar.core.enums import AttendanceStatus
from src.sipintar.sipintar.students.model import Student


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 3, 15)


@pytest.fixture
def make_record():
    def _make(
        student_id: str = "001",
        *,
        name: str = "Budi",
        class_name: str = "X",
        group_name: str = "A",
        status: AttendanceStatus = AttendanceStatus.PRESENT,
        date_text: str = "15/03/2024",
        lesson_hour: str = "1",
        recorded_by: str = "guru1",
    ) -> AttendanceRecord:
        return AttendanceRecord(
            student_id=student_id,
            student_name=name,
            class_name=class_name,
            group_name=group_name,
            lesson_hour=lesson_hour,
            status=status,
            date=date_text,
            recorded_by=recorded_by,
        )

    return _make


@pytest.fixture
def students_x_a():
    return [
        Student(nisn="003", name="Citra", class_name="X", group_name="A"),
        Student(nisn="001", name="Andi", class_name="X", group_name="A"),
        Student(nisn="002", name="Bayu", class_name="X", group_name="A"),
        Student(nisn="004", name="Dewi", class_name="X", group_name="B"),
        Student(nisn="005", name="Eka", class_name="XI", group_name="A"),
    ]
