from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        """All recorded attendance, newest first."""

        raise NotImplementedError

    def submit(self, record: AttendanceRecord) -> bool:
        """Append one record; report failure as False instead of raising."""

        raise NotImplementedError
