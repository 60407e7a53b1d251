from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_REQUEST_TIMEOUT, DEFAULT_SCHEDULED_SIGN_OUT
from .dashboard.controller import register as register_dashboard
from .records.repository import AttendanceSource

logger = logging.getLogger(__name__)


def create_app(source: AttendanceSource | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["ATTENDANCE_API_URL"] = getattr(settings, "ATTENDANCE_API_URL")
    app.config["REQUEST_TIMEOUT"] = float(getattr(settings, "REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT))
    app.config["DISPLAY_TIMEZONE"] = getattr(settings, "DISPLAY_TIMEZONE", "UTC")
    app.config["APP_TITLE"] = getattr(settings, "APP_TITLE", "greyt.io")
    app.config["SCHEDULED_SIGN_OUT"] = getattr(settings, "SCHEDULED_SIGN_OUT", DEFAULT_SCHEDULED_SIGN_OUT)

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    logger.debug("settings=%s source=%s", settings_module, app.config["ATTENDANCE_API_URL"])

    container = build_container(
        api_url=app.config["ATTENDANCE_API_URL"],
        timeout=app.config["REQUEST_TIMEOUT"],
        source=source,
    )

    register_dashboard(app, container)

    return app
