from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Mapping, Optional, Sequence

from ..common.datetime_utils import format_record_date, today_local
from ..common.validators import require_choice, require_non_empty
from ..core.constants import LESSON_HOURS
from ..core.enums import AttendanceStatus, SubmissionOutcome
from ..core.exceptions import ValidationError
from ..students.model import Student
from ..students.service import StudentService
from ..users.model import Teacher
from .history import AttendanceHistoryStore
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    outcome: SubmissionOutcome
    saved: List[AttendanceRecord] = field(default_factory=list)
    failed: List[AttendanceRecord] = field(default_factory=list)

    @property
    def message(self) -> str:
        if self.outcome == SubmissionOutcome.FULL_SUCCESS:
            return f"Berhasil! {len(self.saved)} data absensi telah tersimpan di database."
        if self.outcome == SubmissionOutcome.PARTIAL_SUCCESS:
            return f"Hanya {len(self.saved)} data berhasil. {len(self.failed)} data gagal."
        return "Gagal total mengirim data. Periksa koneksi atau URL Apps Script."


def is_all_marked(students: Sequence[Student], draft: Mapping[str, AttendanceStatus]) -> bool:
    """Every student in the session has a status; never true for an empty class."""
    if not students:
        return False
    return all(draft.get(s.nisn) for s in students)


class AttendanceService:
    """Use case: mark a class session and send it to the sheet."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentService,
        history: AttendanceHistoryStore,
    ):
        self._attendance = attendance
        self._students = students
        self._history = history

    def students_for(self, class_name: str, group_name: str) -> List[Student]:
        if not class_name or not group_name:
            return []
        students = [s for s in self._students.list_all() if s.class_name == class_name and s.group_name == group_name]
        students.sort(key=lambda s: s.name.lower())
        return students

    def submit(
        self,
        *,
        teacher: Teacher,
        lesson_hour: str,
        class_name: str,
        group_name: str,
        draft: Mapping[str, AttendanceStatus],
        today: Optional[date] = None,
    ) -> SubmissionResult:
        lesson_hour = require_choice(lesson_hour, LESSON_HOURS, "Jam pelajaran")
        class_name = require_non_empty(class_name, "Kelas")
        group_name = require_non_empty(group_name, "Rombel")

        students = self.students_for(class_name, group_name)
        if not is_all_marked(students, draft):
            raise ValidationError("Lengkapi semua status siswa sebelum mengirim")

        # History must be loaded before the writes below.
        self._history.ensure_loaded()

        date_text = format_record_date(today or today_local())
        saved: List[AttendanceRecord] = []
        failed: List[AttendanceRecord] = []

        # One write at a time so rows land in the sheet in this order.
        for s in students:
            record = AttendanceRecord(
                student_id=s.nisn,
                student_name=s.name,
                class_name=s.class_name,
                group_name=s.group_name,
                lesson_hour=lesson_hour,
                status=draft[s.nisn],
                date=date_text,
                recorded_by=teacher.username,
            )
            if self._attendance.submit(record):
                saved.append(record)
            else:
                failed.append(record)

        if not failed:
            outcome = SubmissionOutcome.FULL_SUCCESS
        elif saved:
            outcome = SubmissionOutcome.PARTIAL_SUCCESS
        else:
            outcome = SubmissionOutcome.FAILURE

        self._history.prepend(saved)
        logger.info(
            "Attendance submitted by %s for %s/%s hour %s: %d saved, %d failed",
            teacher.username,
            class_name,
            group_name,
            lesson_hour,
            len(saved),
            len(failed),
        )
        return SubmissionResult(outcome=outcome, saved=saved, failed=failed)


def parse_draft(form: Mapping[str, str], students: Sequence[Student]) -> Dict[str, AttendanceStatus]:
    """Read ``status_<nisn>`` form fields into a draft; blank fields stay unmarked."""
    draft: Dict[str, AttendanceStatus] = {}
    for s in students:
        value = (form.get(f"status_{s.nisn}") or "").strip()
        if value:
            draft[s.nisn] = AttendanceStatus.parse(value)
    return draft
