from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.constants import HOLIDAY_LABEL_TOKEN_INDEX, SKIP_PREFIX
from ..records.model import AttendanceRecord, LogEntry


@dataclass(frozen=True)
class HolidayInfo:
    is_holiday: bool
    label: Optional[str] = None


NOT_A_HOLIDAY = HolidayInfo(is_holiday=False)


def find_skip_entry(records: Iterable[AttendanceRecord]) -> Optional[LogEntry]:
    for record in records:
        for entry in record.log:
            if entry.msg.startswith(SKIP_PREFIX):
                return entry
    return None


def extract_holiday_label(msg: str) -> Optional[str]:
    """Pull the human label out of a skip message.

    Upstream has no structured field for this; the label is by convention the
    fifth whitespace-separated word ("Skip holiday for Diwali festival" -> "festival").
    """
    tokens = msg.split()
    if len(tokens) <= HOLIDAY_LABEL_TOKEN_INDEX:
        return None
    return tokens[HOLIDAY_LABEL_TOKEN_INDEX]


def detect_holiday(records: Iterable[AttendanceRecord]) -> HolidayInfo:
    entry = find_skip_entry(records)
    if entry is None:
        return NOT_A_HOLIDAY
    return HolidayInfo(is_holiday=True, label=extract_holiday_label(entry.msg))
