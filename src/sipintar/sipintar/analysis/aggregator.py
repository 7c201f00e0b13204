from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceStats:
    total: int
    counts_by_status: Dict[AttendanceStatus, int]
    attendance_rate: float

    def count(self, status: AttendanceStatus) -> int:
        return self.counts_by_status.get(status, 0)

    @property
    def rate_label(self) -> str:
        return format_rate(self.attendance_rate)


def compute_stats(records: Sequence[AttendanceRecord]) -> AttendanceStats:
    """Counts per status and the share of PRESENT records.

    The caller must check for an empty list first; there is no rate for zero
    records.
    """
    if not records:
        raise ValueError("compute_stats needs at least one record")

    total = len(records)
    counts = {status: 0 for status in AttendanceStatus}
    for r in records:
        counts[r.status] += 1

    rate = counts[AttendanceStatus.PRESENT] / total * 100
    return AttendanceStats(total=total, counts_by_status=counts, attendance_rate=rate)


def format_rate(rate: float) -> str:
    return f"{rate:.1f}"
