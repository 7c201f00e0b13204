from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from google import genai

from .analysis.service import AnalysisService
from .attendance.history import AttendanceHistoryStore
from .attendance.service import AttendanceService
from .attendance.sheet_attendance_repository import SheetAttendanceRepository
from .core.constants import DEFAULT_HTTP_TIMEOUT
from .insights.service import InsightService
from .sheets.apps_script import AppsScriptWriter
from .sheets.connection import SheetConfig, SheetConnection
from .sheets.gviz import GvizSheetReader
from .students.service import StudentService
from .students.sheet_student_repository import SheetStudentRepository
from .users.service import AuthService
from .users.sheet_teacher_repository import SheetTeacherRepository


@dataclass(frozen=True)
class Container:
    conn: SheetConnection

    teachers_repo: SheetTeacherRepository
    students_repo: SheetStudentRepository
    attendance_repo: SheetAttendanceRepository

    history: AttendanceHistoryStore

    auth_service: AuthService
    student_service: StudentService
    attendance_service: AttendanceService
    analysis_service: AnalysisService
    insight_service: InsightService


def build_container(*, sheet_config: dict[str, Any], gemini_api_key: str = "", gemini_model: str) -> Container:
    config = SheetConfig(
        spreadsheet_id=str(sheet_config["spreadsheet_id"]),
        apps_script_url=str(sheet_config.get("apps_script_url") or ""),
        timeout=float(sheet_config.get("timeout", DEFAULT_HTTP_TIMEOUT)),
    )
    conn = SheetConnection.get_instance(config)

    reader = GvizSheetReader(conn)
    writer = AppsScriptWriter(conn)

    teachers_repo = SheetTeacherRepository(reader)
    students_repo = SheetStudentRepository(reader)
    attendance_repo = SheetAttendanceRepository(reader, writer)

    history = AttendanceHistoryStore(attendance_repo)

    auth_service = AuthService(teachers_repo)
    student_service = StudentService(students_repo)
    attendance_service = AttendanceService(attendance_repo, student_service, history)
    analysis_service = AnalysisService(history)

    client = genai.Client(api_key=gemini_api_key) if gemini_api_key else None
    insight_service = InsightService(client, model=gemini_model)

    return Container(
        conn=conn,
        teachers_repo=teachers_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        history=history,
        auth_service=auth_service,
        student_service=student_service,
        attendance_service=attendance_service,
        analysis_service=analysis_service,
        insight_service=insight_service,
    )
