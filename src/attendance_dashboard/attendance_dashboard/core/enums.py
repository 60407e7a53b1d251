from __future__ import annotations

from enum import Enum


class Seq(str, Enum):
    """Which half of a day's attendance a record belongs to."""

    SIGN_IN = "Sign In"
    SIGN_OUT = "Sign Out"


class DayStatus(str, Enum):
    """Aggregate status shown for one day."""

    PASSED = "passed"
    FAILED = "failed"
    PENDING = "pending"


class ViewState(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"
