from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} wajib diisi")
    return str(value).strip()


def require_choice(value: str, choices, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if value not in choices:
        raise ValidationError(f"{field_name} tidak valid")
    return value
