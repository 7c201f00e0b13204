from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..core.constants import SHEET_ATTENDANCE
from ..core.enums import AttendanceStatus
from ..sheets.reader import RowWriter, SheetReader
from ..sheets.rows import first_text, sheet_date_text
from .model import AttendanceRecord
from .repository import AttendanceRepository


def record_from_row(row: Mapping[str, Any]) -> Optional[AttendanceRecord]:
    student_id = first_text(row, "nisn")
    if not student_id:
        return None
    return AttendanceRecord(
        student_id=student_id,
        student_name=first_text(row, "nama", "name"),
        class_name=first_text(row, "kelas", "class"),
        group_name=first_text(row, "rombongan_belajar", "rombel"),
        lesson_hour=first_text(row, "jam_pelajaran", "lesson_hour"),
        status=AttendanceStatus.parse(first_text(row, "status_kehadiran", "status")),
        date=sheet_date_text(first_text(row, "tanggal", "date")),
        recorded_by=first_text(row, "username", "teacher_username"),
    )


class SheetAttendanceRepository(AttendanceRepository):
    def __init__(self, reader: SheetReader, writer: RowWriter, *, sheet_name: str = SHEET_ATTENDANCE):
        self._reader = reader
        self._writer = writer
        self._sheet_name = sheet_name

    def list_all(self) -> Sequence[AttendanceRecord]:
        records = [r for r in map(record_from_row, self._reader.fetch_rows(self._sheet_name)) if r is not None]
        # The sheet is append-only, so the last row is the newest.
        records.reverse()
        return records

    def submit(self, record: AttendanceRecord) -> bool:
        return self._writer.append_row(record.to_payload())
