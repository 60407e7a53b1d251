"""Display helpers registered as Jinja filters."""
from __future__ import annotations

from datetime import tzinfo
from typing import Optional

from ..common.datetime_utils import now_local, parse_iso_date, parse_iso_datetime

_STATUS_CSS = {
    "passed": "text-green",
    "failed": "text-red",
    "pending": "text-yellow",
}

_STATUS_ICON = {
    "passed": "check-circle",
    "failed": "x-circle",
}

# Checked in order; the first keyword found in the message wins.
_STEP_ICONS = (
    (("started",), "activity"),
    (("logged in",), "user"),
    (("sign in",), "log-in"),
    (("sign out",), "log-out"),
    (("logging out",), "power"),
    (("successful",), "check-circle"),
    (("finished", "finshed"), "check-circle-done"),
)


def format_date(value: str) -> str:
    """``"2024-10-17"`` -> ``"Thu, 17-10-2024"``. Unparseable values are shown as-is."""
    try:
        return parse_iso_date(value).strftime("%a, %d-%m-%Y")
    except ValueError:
        return value


def _to_tz(value: str, tz: Optional[tzinfo]):
    dt = parse_iso_datetime(value)
    if tz is not None and dt.tzinfo is not None:
        dt = dt.astimezone(tz)
    return dt


def format_time(value: Optional[str], tz: Optional[tzinfo] = None) -> str:
    if not value:
        return "--:--"
    try:
        return _to_tz(value, tz).strftime("%I:%M %p")
    except ValueError:
        return value


def format_time_hhmmss(value: Optional[str], tz: Optional[tzinfo] = None) -> str:
    if not value:
        return "--:--:--"
    try:
        return _to_tz(value, tz).strftime("%I:%M:%S %p")
    except ValueError:
        return value


def status_css(status: Optional[str]) -> str:
    return _STATUS_CSS.get((status or "").lower(), "text-gray")


def status_icon(status: Optional[str]) -> str:
    return _STATUS_ICON.get((status or "").lower(), "alert-circle")


def step_icon(msg: str) -> str:
    lower = msg.lower()
    for keywords, icon in _STEP_ICONS:
        if any(k in lower for k in keywords):
            return icon
    return "chevron-right"


def format_today(tz: Optional[tzinfo] = None) -> str:
    """Header of the today card, e.g. ``"17/10/2024"``."""
    return now_local(tz).strftime("%d/%m/%Y")
