"""Print the Google Apps Script to deploy as the attendance write endpoint.

Deploy it as a web app (access: anyone) and put its URL in APPS_SCRIPT_URL.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.sipintar.sipintar.core.constants import SHEET_ATTENDANCE
from src.sipintar.sipintar.sheets.apps_script import render_apps_script


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    print(render_apps_script(settings.SHEET_CONFIG["spreadsheet_id"], SHEET_ATTENDANCE))


if __name__ == "__main__":
    main()
