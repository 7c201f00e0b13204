from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .analysis.controller import register as register_analysis
from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .students.controller import register as register_students
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    sheet_config = getattr(settings, "SHEET_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format=LOG_FORMAT)
    logger.info("settings=%s spreadsheet=%s", settings_module, sheet_config.get("spreadsheet_id"))

    if container is None:
        container = build_container(
            sheet_config=sheet_config,
            gemini_api_key=getattr(settings, "GEMINI_API_KEY", ""),
            gemini_model=getattr(settings, "GEMINI_MODEL"),
        )
        if container.conn.is_demo:
            logger.warning("APPS_SCRIPT_URL is the placeholder; attendance writes are simulated")

    register_users(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_analysis(app, container)

    return app
