from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status kehadiran siswa, nilainya sama dengan yang tersimpan di spreadsheet."""

    PRESENT = "Hadir"
    EXCUSED_LEAVE = "Izin"
    SICK = "Sakit"
    ABSENT = "Alpa"

    @classmethod
    def parse(cls, value) -> "AttendanceStatus":
        """Lenient lookup: anything unrecognized counts as PRESENT."""
        text = str(value or "").strip().lower()
        for status in cls:
            if text in (status.value.lower(), status.name.lower()):
                return status
        return cls.PRESENT


class Period(str, Enum):
    """Preset rentang tanggal untuk filter riwayat/analisa."""

    ALL = "all"
    TODAY = "today"
    LAST_7_DAYS = "7days"
    THIS_MONTH = "month"
    CUSTOM_RANGE = "custom"

    @classmethod
    def parse(cls, value) -> "Period":
        try:
            return cls(str(value or cls.ALL.value))
        except ValueError:
            return cls.ALL


class SubmissionOutcome(str, Enum):
    FULL_SUCCESS = "success"
    PARTIAL_SUCCESS = "partial"
    FAILURE = "failure"
