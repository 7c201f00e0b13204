from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import requests

from ..core.constants import APPS_SCRIPT_PLACEHOLDER, DEFAULT_HTTP_TIMEOUT

GVIZ_URL = "https://docs.google.com/spreadsheets/d/{spreadsheet_id}/gviz/tq?tqx=out:json&sheet={sheet}"


@dataclass
class SheetConfig:
    spreadsheet_id: str
    apps_script_url: str
    timeout: float = DEFAULT_HTTP_TIMEOUT


class SheetConnection:
    """Singleton-like HTTP access to the spreadsheet.

    Note: One ``requests.Session`` is shared so connections to Google are reused.
    """

    _instance: Optional["SheetConnection"] = None

    def __init__(self, config: SheetConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    @classmethod
    def get_instance(cls, config: SheetConfig) -> "SheetConnection":
        if cls._instance is None:
            cls._instance = SheetConnection(config)
        return cls._instance

    @property
    def config(self) -> SheetConfig:
        return self._config

    @property
    def is_demo(self) -> bool:
        """True while the Apps Script URL is still the placeholder deployment."""
        return APPS_SCRIPT_PLACEHOLDER in (self._config.apps_script_url or "")

    def gviz_url(self, sheet_name: str) -> str:
        return GVIZ_URL.format(spreadsheet_id=self._config.spreadsheet_id, sheet=quote(sheet_name))

    def get_text(self, url: str) -> str:
        resp = self._session.get(url, timeout=self._config.timeout)
        resp.raise_for_status()
        return resp.text

    def post_json(self, url: str, payload: dict[str, Any]) -> requests.Response:
        resp = self._session.post(url, json=payload, timeout=self._config.timeout)
        resp.raise_for_status()
        return resp
