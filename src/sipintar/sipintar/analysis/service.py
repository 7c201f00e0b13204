from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import List, Optional

from ..attendance.filters import filter_records, unique_classes
from ..attendance.history import AttendanceHistoryStore
from ..attendance.model import AttendanceRecord, FilterCriteria
from ..core.constants import ALL
from .aggregator import AttendanceStats, compute_stats


@dataclass(frozen=True)
class AnalysisReport:
    records: List[AttendanceRecord]
    stats: Optional[AttendanceStats]
    classes: List[str]

    @property
    def is_empty(self) -> bool:
        return not self.records


class AnalysisService:
    """Use case: statistics over the filtered attendance history.

    The analysis view filters by class and period only.
    """

    def __init__(self, history: AttendanceHistoryStore):
        self._history = history

    def build_report(self, criteria: FilterCriteria, *, today: Optional[date] = None) -> AnalysisReport:
        records = self._history.records()
        criteria = replace(criteria, group_filter=ALL, search_text="")
        filtered = filter_records(records, criteria, today=today)
        stats = compute_stats(filtered) if filtered else None
        return AnalysisReport(records=filtered, stats=stats, classes=unique_classes(records))
