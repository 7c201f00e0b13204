from __future__ import annotations

from typing import Any, Dict, List, Protocol


class SheetReader(Protocol):
    """Read gateway interface; services depend on this, not on HTTP."""

    def fetch_rows(self, sheet_name: str) -> List[Dict[str, Any]]:
        raise NotImplementedError


class RowWriter(Protocol):
    def append_row(self, payload: Dict[str, Any]) -> bool:
        raise NotImplementedError
