from __future__ import annotations

from dataclasses import dataclass

import pytest

from src.sipintar.sipintar.core.exceptions import AuthenticationError
from src.sipintar.sipintar.users.model import Teacher
from src.sipintar.sipintar.users.service import AuthService
from src.sipintar.sipintar.users.sheet_teacher_repository import SheetTeacherRepository, teacher_from_row


@dataclass
class InMemoryTeachers:
    teachers: list

    def list_all(self):
        return list(self.teachers)


class FakeReader:
    def __init__(self, rows):
        self.rows = rows

    def fetch_rows(self, sheet_name):
        return self.rows


def _auth() -> AuthService:
    return AuthService(InMemoryTeachers([Teacher(username="BuSari", password="rahasia", name="Bu Sari")]))


def test_login_username_is_case_insensitive():
    s_teacher = _auth().authenticate("  busari ", " rahasia ")

    assert s_teacher.username == "BuSari"
    assert s_teacher.name == "Bu Sari"


def test_login_wrong_password_raises():
    with pytest.raises(AuthenticationError):
        _auth().authenticate("busari", "Rahasia")


def test_login_empty_credentials_raise():
    with pytest.raises(AuthenticationError):
        _auth().authenticate("", "")


def test_teacher_row_mapping_trims_and_defaults_name():
    assert teacher_from_row({"user_name": " guru1 ", "password": 1234.0}) == Teacher(
        username="guru1", password="1234", name="guru1"
    )
    assert teacher_from_row({"username": "g", "nama": " Pak Budi "}).name == "Pak Budi"
    assert teacher_from_row({"username": "  ", "password": "x"}) is None


def test_sheet_repository_drops_rows_without_username():
    repo = SheetTeacherRepository(FakeReader([{"username": "a"}, {"nama": "tanpa username"}]))

    assert [t.username for t in repo.list_all()] == ["a"]
