from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Student directory, fetched once and kept until ``refresh``."""

    def __init__(self, students: StudentRepository):
        self._students = students
        self._cache: Optional[List[Student]] = None

    def list_all(self) -> List[Student]:
        if self._cache is None:
            self.refresh()
        return list(self._cache or [])

    def refresh(self) -> None:
        self._cache = list(self._students.list_all())
        logger.info("Student directory loaded (%d students)", len(self._cache))

    def classes(self) -> List[str]:
        return sorted({s.class_name for s in self.list_all()})

    def groups(self, class_name: str) -> List[str]:
        if not class_name:
            return []
        return sorted({s.group_name for s in self.list_all() if s.class_name == class_name})

    def search(self, search_text: str) -> List[Student]:
        return search_students(self.list_all(), search_text)


def search_students(students: Sequence[Student], search_text: str) -> List[Student]:
    """Name, class and rombel ignore case; NISN matches verbatim."""
    if not search_text:
        return list(students)
    needle = search_text.lower()
    return [
        s
        for s in students
        if needle in s.name.lower()
        or search_text in s.nisn
        or needle in s.class_name.lower()
        or needle in s.group_name.lower()
    ]
