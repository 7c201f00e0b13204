"""Contoh: memakai service layer tanpa Flask.

Controllers hanya lapisan tipis; logika ada di services.
"""

import importlib

from config import get_settings_module

from src.sipintar.sipintar.attendance.model import FilterCriteria
from src.sipintar.sipintar.container import build_container
from src.sipintar.sipintar.core.enums import AttendanceStatus, Period


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(sheet_config=settings.SHEET_CONFIG, gemini_model=settings.GEMINI_MODEL)
    report = container.analysis_service.build_report(FilterCriteria(period=Period.THIS_MONTH))
    if report.stats is None:
        print("Belum ada data bulan ini")
        return
    print(f"Total: {report.stats.total}, kehadiran {report.stats.rate_label}%")
    for status in AttendanceStatus:
        print(f"  {status.value}: {report.stats.count(status)}")


if __name__ == "__main__":
    main()
