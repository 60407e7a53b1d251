"""Reduce a day's sign-in/sign-out values into one display value.

Both functions use truthiness for presence, so an empty status string or a
duration of 0 counts as missing. This mirrors what the dashboard has always
shown and is kept as-is.
"""
from __future__ import annotations

from typing import Optional

from ..core.constants import EMPTY_DURATION, FAILED_STATUS
from ..core.enums import DayStatus


def aggregate_status(sign_in_status: Optional[str], sign_out_status: Optional[str]) -> DayStatus:
    """Combine the two per-record statuses.

    Only one side present -> pending, whatever its value. Otherwise a literal
    ``"failed"`` on either side wins. Both missing falls through to passed.
    """
    if bool(sign_in_status) != bool(sign_out_status):
        return DayStatus.PENDING
    if sign_in_status == FAILED_STATUS or sign_out_status == FAILED_STATUS:
        return DayStatus.FAILED
    return DayStatus.PASSED


def aggregate_duration(sign_in_ms: Optional[float], sign_out_ms: Optional[float]) -> str:
    """Average of both durations in seconds with one decimal, e.g. ``"5.0s"``."""
    if sign_in_ms and sign_out_ms:
        return f"{(sign_in_ms + sign_out_ms) / 2000:.1f}s"
    return EMPTY_DURATION
