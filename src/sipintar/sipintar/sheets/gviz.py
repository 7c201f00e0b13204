from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List

from .connection import SheetConnection

logger = logging.getLogger(__name__)

_RESPONSE_RE = re.compile(r"setResponse\((.*)\)\s*;?\s*$", re.DOTALL)


def unwrap_response(text: str) -> Dict[str, Any]:
    """Strip the ``google.visualization.Query.setResponse(...)`` callback wrapper."""
    match = _RESPONSE_RE.search(text)
    body = match.group(1) if match else text[47:-2]
    return json.loads(body)


def normalize_label(label: str, index: int) -> str:
    return (label or "").lower().replace(" ", "_") or f"col_{index}"


def table_to_rows(table: Dict[str, Any]) -> List[Dict[str, Any]]:
    cols = table.get("cols") or []
    keys = [normalize_label(c.get("label", ""), i) for i, c in enumerate(cols)]

    rows: List[Dict[str, Any]] = []
    for row in table.get("rows") or []:
        item: Dict[str, Any] = {}
        for i, cell in enumerate(row.get("c") or []):
            key = keys[i] if i < len(keys) else f"col_{i}"
            item[key] = cell.get("v") if cell else None
        rows.append(item)
    return rows


class GvizSheetReader:
    """Read gateway: whole sheets through the public visualization API."""

    def __init__(self, conn: SheetConnection):
        self._conn = conn

    def fetch_rows(self, sheet_name: str) -> List[Dict[str, Any]]:
        """Rows keyed by normalized column label; [] on any failure."""
        try:
            text = self._conn.get_text(self._conn.gviz_url(sheet_name))
            rows = table_to_rows(unwrap_response(text)["table"])
        except Exception:
            logger.exception("Error fetching sheet %s", sheet_name)
            return []

        logger.debug("Fetched %d rows from sheet %s", len(rows), sheet_name)
        return rows
