from __future__ import annotations

from typing import Protocol, Sequence

from .model import Teacher


class TeacherRepository(Protocol):
    """Repository interface for teachers.

    Services depend on this protocol, not on the spreadsheet directly.
    """

    def list_all(self) -> Sequence[Teacher]:
        raise NotImplementedError
