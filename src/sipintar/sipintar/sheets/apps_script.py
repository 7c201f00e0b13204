from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from .connection import SheetConnection

logger = logging.getLogger(__name__)


class AppsScriptWriter:
    """Write gateway: appends one row through the deployed Apps Script web app.

    Failures never leave this class; they come back as ``False``.
    """

    def __init__(self, conn: SheetConnection):
        self._conn = conn

    def append_row(self, payload: Dict[str, Any]) -> bool:
        if self._conn.is_demo:
            logger.warning("Apps Script URL not set. Simulating success...")
            return True
        if not self._conn.config.apps_script_url:
            logger.error("APPS_SCRIPT_URL is empty; cannot submit attendance")
            return False

        try:
            self._conn.post_json(self._conn.config.apps_script_url, payload)
        except requests.RequestException:
            logger.exception("Error submitting attendance row for %s", payload.get("nisn"))
            return False
        return True


APPS_SCRIPT_SOURCE = """
function doPost(e) {
  var sheet = SpreadsheetApp.openById("%(spreadsheet_id)s").getSheetByName("%(sheet_name)s");
  var data = JSON.parse(e.postData.contents);

  sheet.appendRow([
    data.nisn,
    data.name,
    data.class,
    data.rombel,
    data.lessonHour,
    data.status,
    data.date,
    data.teacherUsername
  ]);

  return ContentService.createTextOutput(JSON.stringify({result: "success"})).setMimeType(ContentService.MimeType.JSON);
}
"""


def render_apps_script(spreadsheet_id: str, sheet_name: str) -> str:
    """Source of the web app to deploy as the write endpoint."""
    return APPS_SCRIPT_SOURCE % {"spreadsheet_id": spreadsheet_id, "sheet_name": sheet_name}
