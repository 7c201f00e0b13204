"""Backup the attendance sheet to CSV.

Note: The spreadsheet stays the source of truth; this only keeps a local copy.
"""

from __future__ import annotations

import csv
import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.sipintar.sipintar.common.web import record_to_json
from src.sipintar.sipintar.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        sheet_config=settings.SHEET_CONFIG,
        gemini_model=settings.GEMINI_MODEL,
    )
    records = container.attendance_repo.list_all()
    if not records:
        raise SystemExit("Tidak ada data kehadiran (sheet kosong atau gagal diambil).")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"data_kehadiran_{ts}.csv"

    rows = [record_to_json(r) for r in records]
    with out_file.open("w", newline="", encoding="utf-8-sig") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0]))
        writer.writeheader()
        writer.writerows(rows)
    print(f"OK: Backup created: {out_file} ({len(rows)} rows)")


if __name__ == "__main__":
    main()
