from __future__ import annotations

from zoneinfo import ZoneInfo

from flask import Flask, abort, jsonify, render_template, request

from ..common import datetime_utils
from ..container import Container
from ..core.constants import EMPTY_STATE_MESSAGE
from ..core.exceptions import NotFoundError
from ..settings.model import NotificationSettings
from . import presenter


def _settings_from_args() -> NotificationSettings:
    """Rebuild the settings panel from the query string; nothing is stored."""
    settings = NotificationSettings()
    days: dict[int, None] = {}
    for raw in request.args.getlist("day"):
        try:
            days[int(raw)] = None
        except ValueError:
            continue
    # A day listed twice is still just selected.
    for day in days:
        settings = settings.toggle_day(day)
    if request.args.get("notify") == "off":
        settings = settings.toggle_notify()
    return settings


def register(app: Flask, container: Container) -> None:
    tz = ZoneInfo(app.config["DISPLAY_TIMEZONE"])
    service = container.dashboard_service

    app.add_template_filter(presenter.format_date, "format_date")
    app.add_template_filter(lambda v: presenter.format_time(v, tz), "format_time")
    app.add_template_filter(lambda v: presenter.format_time_hhmmss(v, tz), "format_time_hhmmss")
    app.add_template_filter(presenter.status_css, "status_css")
    app.add_template_filter(presenter.status_icon, "status_icon")
    app.add_template_filter(presenter.step_icon, "step_icon")

    @app.context_processor
    def inject_layout():
        return {
            "app_title": app.config["APP_TITLE"],
            "scheduled_sign_out": app.config["SCHEDULED_SIGN_OUT"],
        }

    @app.route("/", endpoint="dashboard")
    def dashboard():
        # Every visit re-fetches; there is no cache between page views.
        state = service.load()
        rows, today = [], None
        if state.is_ready:
            rows = service.build_rows(state.records)
            today = service.today(state.records, datetime_utils.today_iso(tz))
        return render_template(
            "dashboard.html",
            state=state,
            rows=rows,
            today=today,
            today_label=presenter.format_today(tz),
            settings=_settings_from_args(),
            empty_message=EMPTY_STATE_MESSAGE,
        ), (502 if state.is_error else 200)

    @app.route("/days/<date>", endpoint="day_detail")
    def day_detail(date: str):
        state = service.load()
        if state.is_error:
            return render_template("error.html", message=state.message), 502
        try:
            pair = service.day_detail(state.records, date)
        except NotFoundError as e:
            abort(404, description=str(e))
        return render_template("day_detail.html", date=date, pair=pair)

    @app.route("/api/days", methods=["GET"], endpoint="api_days")
    def api_days():
        state = service.load()
        if state.is_error:
            return jsonify({"state": state.kind.value, "rows": [], "message": state.message}), 502

        rows = [r.to_dict() for r in service.build_rows(state.records)]
        return jsonify({
            "state": state.kind.value,
            "rows": rows,
            "message": EMPTY_STATE_MESSAGE if not rows else None,
        }), 200
