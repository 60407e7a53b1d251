from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value[:10], "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z`` for UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def now_local(tz: Optional[tzinfo] = None) -> datetime:
    """Current time in ``tz``.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz)


def today_iso(tz: Optional[tzinfo] = None) -> str:
    """Today's date in the same YYYY-MM-DD form the records use as grouping key."""
    return now_local(tz).date().isoformat()
