from __future__ import annotations

import logging
import threading
from typing import List, Optional, Sequence

from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceHistoryStore:
    """In-memory attendance history, newest first.

    Loaded from the sheet on first use; afterwards only ``refresh`` reloads it
    and ``prepend`` puts what this app instance submitted in front of what was
    already there.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance
        self._records: Optional[List[AttendanceRecord]] = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._records is not None

    def ensure_loaded(self) -> None:
        if self._records is None:
            self.refresh()

    def records(self) -> List[AttendanceRecord]:
        self.ensure_loaded()
        return list(self._records or [])

    def refresh(self) -> List[AttendanceRecord]:
        loaded = list(self._attendance.list_all())
        with self._lock:
            self._records = loaded
        logger.info("Attendance history loaded (%d records)", len(loaded))
        return list(loaded)

    def prepend(self, new_records: Sequence[AttendanceRecord]) -> None:
        if not new_records:
            return
        self.ensure_loaded()
        with self._lock:
            self._records = list(new_records) + list(self._records or [])
