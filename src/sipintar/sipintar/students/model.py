from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Entitas domain: Siswa (baris dari sheet "Data Siswa")."""

    nisn: str
    name: str
    class_name: str
    group_name: str
