from __future__ import annotations

from dataclasses import dataclass

from ..core.exceptions import AuthenticationError
from .repository import TeacherRepository


@dataclass(frozen=True)
class SessionTeacher:
    """What we store into Flask session after login."""

    username: str
    name: str


class AuthService:
    """Use case: authenticate teacher (login) against the "Data Guru" sheet.

    Usernames compare case-insensitively; passwords compare as plain text.
    """

    def __init__(self, teachers: TeacherRepository):
        self._teachers = teachers

    def authenticate(self, username: str, password: str) -> SessionTeacher:
        username = (username or "").strip().lower()
        password = (password or "").strip()

        for t in self._teachers.list_all():
            if t.username.lower() == username and t.password == password:
                return SessionTeacher(username=t.username, name=t.name)

        raise AuthenticationError("Username atau password tidak ditemukan di database Guru.")
