from __future__ import annotations

from src.sipintar.sipintar.students.model import Student
from src.sipintar.sipintar.students.service import StudentService, search_students
from src.sipintar.sipintar.students.sheet_student_repository import SheetStudentRepository, student_from_row


class CountingStudents:
    def __init__(self, students):
        self.students = list(students)
        self.calls = 0

    def list_all(self):
        self.calls += 1
        return list(self.students)


class FakeReader:
    def __init__(self, rows):
        self.rows = rows

    def fetch_rows(self, sheet_name):
        return self.rows


def test_student_row_mapping_prefers_indonesian_labels():
    row = {"nisn": " 0012 ", "nama": "Andi ", "kelas": "X", "rombongan_belajar": "A", "rombel": "Z"}

    assert student_from_row(row) == Student(nisn="0012", name="Andi", class_name="X", group_name="A")
    assert student_from_row({"nisn": "1", "group": "B"}).group_name == "B"
    assert student_from_row({"nama": "tanpa nisn"}) is None


def test_sheet_repository_filters_empty_nisn():
    repo = SheetStudentRepository(FakeReader([{"nisn": "1"}, {"nisn": ""}, {"nisn": None}]))

    assert [s.nisn for s in repo.list_all()] == ["1"]


def test_service_caches_until_refresh(students_x_a):
    repo = CountingStudents(students_x_a)
    svc = StudentService(repo)

    svc.list_all()
    svc.classes()
    assert repo.calls == 1

    svc.refresh()
    assert repo.calls == 2


def test_classes_and_groups(students_x_a):
    svc = StudentService(CountingStudents(students_x_a))

    assert svc.classes() == ["X", "XI"]
    assert svc.groups("X") == ["A", "B"]
    assert svc.groups("") == []


def test_search_students(students_x_a):
    assert [s.nisn for s in search_students(students_x_a, "dew")] == ["004"]
    assert [s.nisn for s in search_students(students_x_a, "00")] == ["003", "001", "002", "004", "005"]
    assert [s.nisn for s in search_students(students_x_a, "xi")] == ["005"]
    assert [s.nisn for s in search_students(students_x_a, "b")] == ["002", "004"]
    assert search_students(students_x_a, "") == students_x_a
