from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..core.constants import SHEET_STUDENTS
from ..sheets.reader import SheetReader
from ..sheets.rows import first_text
from .model import Student
from .repository import StudentRepository


def student_from_row(row: Mapping[str, Any]) -> Optional[Student]:
    nisn = first_text(row, "nisn")
    if not nisn:
        return None
    return Student(
        nisn=nisn,
        name=first_text(row, "nama", "name"),
        class_name=first_text(row, "kelas", "class"),
        group_name=first_text(row, "rombongan_belajar", "rombel", "group"),
    )


class SheetStudentRepository(StudentRepository):
    def __init__(self, reader: SheetReader, *, sheet_name: str = SHEET_STUDENTS):
        self._reader = reader
        self._sheet_name = sheet_name

    def list_all(self) -> Sequence[Student]:
        students = (student_from_row(r) for r in self._reader.fetch_rows(self._sheet_name))
        return [s for s in students if s is not None]
