from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..core.constants import SHEET_TEACHERS
from ..sheets.reader import SheetReader
from ..sheets.rows import first_text
from .model import Teacher
from .repository import TeacherRepository


def teacher_from_row(row: Mapping[str, Any]) -> Optional[Teacher]:
    username = first_text(row, "username", "user_name")
    if not username:
        return None
    return Teacher(
        username=username,
        password=first_text(row, "password"),
        name=first_text(row, "nama", "name", default=username),
    )


class SheetTeacherRepository(TeacherRepository):
    def __init__(self, reader: SheetReader, *, sheet_name: str = SHEET_TEACHERS):
        self._reader = reader
        self._sheet_name = sheet_name

    def list_all(self) -> Sequence[Teacher]:
        teachers = (teacher_from_row(r) for r in self._reader.fetch_rows(self._sheet_name))
        return [t for t in teachers if t is not None]
