from __future__ import annotations

import requests

from src.sipintar.sipintar.sheets.apps_script import AppsScriptWriter, render_apps_script
from src.sipintar.sipintar.sheets.connection import SheetConfig, SheetConnection

URL = "https://script.google.com/macros/s/abc/exec"


class FakeResponse:
    def __init__(self, status=200):
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code}")


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.posts = []

    def post(self, url, json=None, timeout=None):
        self.posts.append((url, json))
        if self.error:
            raise self.error
        return self.response


def _writer(url, session):
    return AppsScriptWriter(SheetConnection(SheetConfig(spreadsheet_id="id", apps_script_url=url), session=session))


def test_append_row_posts_json():
    session = FakeSession()

    assert _writer(URL, session).append_row({"nisn": "1"}) is True
    assert session.posts == [(URL, {"nisn": "1"})]


def test_append_row_reports_failure_instead_of_raising():
    assert _writer(URL, FakeSession(error=requests.ConnectionError("offline"))).append_row({"nisn": "1"}) is False
    assert _writer(URL, FakeSession(FakeResponse(500))).append_row({"nisn": "1"}) is False


def test_placeholder_url_simulates_success():
    session = FakeSession()
    writer = _writer("https://script.google.com/macros/s/AKfycbz_REPLACE_WITH_YOUR_DEPLOYED_ID/exec", session)

    assert writer.append_row({"nisn": "1"}) is True
    assert session.posts == []


def test_empty_url_fails():
    assert _writer("", FakeSession()).append_row({"nisn": "1"}) is False


def test_render_apps_script_fills_ids():
    source = render_apps_script("sheet-123", "Data Kehadiran")

    assert 'openById("sheet-123")' in source
    assert 'getSheetByName("Data Kehadiran")' in source
