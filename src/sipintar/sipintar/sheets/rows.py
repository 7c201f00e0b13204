"""Coercion helpers for the loosely typed rows the gviz API returns."""

from __future__ import annotations

import re
from typing import Any, Mapping


def as_text(value: Any) -> str:
    """String-cast a cell value; None becomes "" and whole floats lose ".0"."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def first_text(row: Mapping[str, Any], *keys: str, default: str = "") -> str:
    """First non-empty value among ``keys``, trimmed.

    Sheets are edited by hand, so the same column shows up under several labels.
    """
    for key in keys:
        value = row.get(key)
        if value:
            text = as_text(value).strip()
            if text:
                return text
    return default


_GVIZ_DATE_RE = re.compile(r"^Date\((\d+),(\d+),(\d+)")


def sheet_date_text(value: str) -> str:
    """Render gviz date literals (``Date(2024,2,15)``, month zero-based) as dd/mm/yyyy.

    Date cells typed by hand as text are passed through unchanged.
    """
    match = _GVIZ_DATE_RE.match(value)
    if not match:
        return value
    year, month, day = (int(g) for g in match.groups())
    return f"{day:02d}/{month + 1:02d}/{year:04d}"
