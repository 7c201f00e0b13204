from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Teacher:
    """Entitas domain: Guru (baris dari sheet "Data Guru").

    Catatan: password disimpan apa adanya di spreadsheet.
    """

    username: str
    password: str
    name: str
