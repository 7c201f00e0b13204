from src.sipintar.sipintar.attendance.sheet_attendance_repository import SheetAttendanceRepository, record_from_row
from src.sipintar.sipintar.core.enums import AttendanceStatus


class FakeReader:
    def __init__(self, rows):
        self.rows = rows
        self.sheets = []

    def fetch_rows(self, sheet_name):
        self.sheets.append(sheet_name)
        return self.rows


class FakeWriter:
    def __init__(self, ok=True):
        self.ok = ok
        self.payloads = []

    def append_row(self, payload):
        self.payloads.append(payload)
        return self.ok


def test_record_from_row_uses_indonesian_labels():
    row = {
        "nisn": 12345.0,
        "nama": "Budi",
        "kelas": "X",
        "rombongan_belajar": "A",
        "jam_pelajaran": 3,
        "status_kehadiran": "Sakit",
        "tanggal": "15/03/2024",
        "username": "guru1",
    }

    r = record_from_row(row)

    assert r.student_id == "12345"
    assert r.lesson_hour == "3"
    assert r.status == AttendanceStatus.SICK
    assert r.group_name == "A"
    assert r.recorded_by == "guru1"


def test_record_from_row_falls_back_to_english_labels():
    row = {"nisn": "1", "name": "Sari", "class": "XI", "rombel": "B", "lesson_hour": "2", "status": "Izin", "date": "01/02/2024", "teacher_username": "g"}

    r = record_from_row(row)

    assert (r.student_name, r.class_name, r.group_name) == ("Sari", "XI", "B")
    assert r.status == AttendanceStatus.EXCUSED_LEAVE


def test_unknown_or_missing_status_is_present():
    assert record_from_row({"nisn": "1", "status": "Terlambat"}).status == AttendanceStatus.PRESENT
    assert record_from_row({"nisn": "1", "status": None}).status == AttendanceStatus.PRESENT
    assert record_from_row({"nisn": "1", "status": " sakit "}).status == AttendanceStatus.SICK


def test_gviz_date_literal_is_rendered_as_record_date():
    assert record_from_row({"nisn": "1", "tanggal": "Date(2024,2,15)"}).date == "15/03/2024"


def test_list_all_drops_rows_without_nisn_and_reverses():
    reader = FakeReader([{"nisn": "1"}, {"nisn": "  "}, {"nisn": None}, {"nisn": "2"}])
    repo = SheetAttendanceRepository(reader, FakeWriter())

    records = repo.list_all()

    assert [r.student_id for r in records] == ["2", "1"]
    assert reader.sheets == ["Data Kehadiran"]
    assert records[0].student_name == ""


def test_submit_sends_apps_script_payload(make_record):
    writer = FakeWriter(ok=False)
    repo = SheetAttendanceRepository(FakeReader([]), writer)

    assert repo.submit(make_record("7", status=AttendanceStatus.ABSENT)) is False
    assert writer.payloads == [
        {
            "nisn": "7",
            "name": "Budi",
            "class": "X",
            "rombel": "A",
            "lessonHour": "1",
            "status": "Alpa",
            "date": "15/03/2024",
            "teacherUsername": "guru1",
        }
    ]
