from __future__ import annotations

import pytest

from src.attendance_dashboard.attendance_dashboard.common import datetime_utils
from src.attendance_dashboard.attendance_dashboard.core.enums import Seq
from src.attendance_dashboard.attendance_dashboard.core.exceptions import FetchError
from src.attendance_dashboard.attendance_dashboard.main import create_app
from src.attendance_dashboard.attendance_dashboard.records.model import AttendanceRecord, LogEntry


class InMemorySource:
    def __init__(self, records=None, error=None):
        self.records = records or []
        self.error = error

    def fetch_all(self):
        if self.error:
            raise FetchError(self.error)
        return list(self.records)


def _rec(date, seq, *, status="passed", duration=5000, log=("Started",), error=None):
    return AttendanceRecord(
        id=f"{date}-{seq.value}",
        user="u",
        date=date,
        seq=seq,
        log=tuple(LogEntry(at=f"{date}T05:00:00Z", msg=m) for m in log),
        status=status,
        duration=duration,
        error=error,
        at=f"{date}T05:30:00Z",
    )


@pytest.fixture
def source():
    return InMemorySource()


@pytest.fixture
def client(monkeypatch, source):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(source=source)
    return app.test_client()


def test_empty_feed_shows_empty_state_and_no_today_card(client):
    resp = client.get("/")

    body = resp.get_data(as_text=True)
    assert resp.status_code == 200
    assert "No attendance records found" in body
    assert "Today " not in body


def test_fetch_failure_shows_banner_only(client, source):
    source.error = "Failed to fetch data"

    resp = client.get("/")

    body = resp.get_data(as_text=True)
    assert resp.status_code == 502
    assert "Failed to fetch data" in body
    assert "<table>" not in body


def test_rows_rendered(client, source):
    source.records = [
        _rec("2024-10-28", Seq.SIGN_IN, duration=4000),
        _rec("2024-10-28", Seq.SIGN_OUT, duration=6000),
        _rec("2024-10-31", Seq.SIGN_IN, log=("Skip holiday for Diwali festival",)),
    ]

    body = client.get("/").get_data(as_text=True)

    assert "Mon, 28-10-2024" in body
    assert "5.0s" in body
    assert "festival" in body
    assert "/days/2024-10-28" in body
    assert "/days/2024-10-31" not in body
    assert "No attendance records found" not in body


def test_today_card(client, source, monkeypatch):
    monkeypatch.setattr(datetime_utils, "today_iso", lambda tz=None: "2024-10-28")
    source.records = [_rec("2024-10-28", Seq.SIGN_IN)]

    body = client.get("/").get_data(as_text=True)

    assert "Signed in" in body
    assert "Scheduled" in body
    assert "18:45pm" in body


def test_settings_panel_reflects_query(client):
    body = client.get("/?day=3&notify=off").get_data(as_text=True)

    assert 'value="3" checked' in body
    assert "11:00 AM" in body


def test_day_detail_shows_logs_and_error(client, source):
    source.records = [
        _rec("2024-10-29", Seq.SIGN_IN, status="failed", log=("Started", "Logged in"), error="Sign in button not found"),
    ]

    resp = client.get("/days/2024-10-29")

    body = resp.get_data(as_text=True)
    assert resp.status_code == 200
    assert "Automation details" in body
    assert "Sign in button not found" in body
    assert "Logged in" in body
    assert "No data" in body


def test_day_detail_holiday_is_404(client, source):
    source.records = [_rec("2024-10-31", Seq.SIGN_IN, log=("Skip holiday for Diwali festival",))]

    assert client.get("/days/2024-10-31").status_code == 404


def test_day_detail_unknown_is_404(client):
    assert client.get("/days/2024-01-01").status_code == 404


def test_api_days(client, source):
    source.records = [_rec("2024-10-28", Seq.SIGN_IN, duration=4000), _rec("2024-10-28", Seq.SIGN_OUT, duration=6000)]

    data = client.get("/api/days").get_json()

    assert data["state"] == "ready"
    assert data["rows"] == [
        {
            "date": "2024-10-28",
            "sign_in": True,
            "sign_out": True,
            "duration": "5.0s",
            "status": "passed",
            "is_holiday": False,
            "holiday_label": None,
        }
    ]


def test_api_days_empty(client):
    data = client.get("/api/days").get_json()

    assert data["rows"] == []
    assert data["message"] == "No attendance records found"


def test_api_days_fetch_failure(client, source):
    source.error = "connection refused"

    resp = client.get("/api/days")

    assert resp.status_code == 502
    assert resp.get_json() == {"state": "error", "rows": [], "message": "connection refused"}


def test_repeated_day_in_query_stays_selected(client):
    body = client.get("/?day=3&day=3&day=7").get_data(as_text=True)

    assert 'value="3" checked' in body
    assert 'value="7" checked' in body
    assert 'value="4" checked' not in body


def test_detail_log_carries_record_id(client, source):
    source.records = [_rec("2024-10-28", Seq.SIGN_IN), _rec("2024-10-28", Seq.SIGN_OUT)]

    body = client.get("/days/2024-10-28").get_data(as_text=True)

    assert 'data-record-id="2024-10-28-Sign In"' in body
    assert 'data-record-id="2024-10-28-Sign Out"' in body
