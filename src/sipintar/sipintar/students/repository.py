from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError
