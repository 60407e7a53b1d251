from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..core.enums import DayStatus
from ..core.exceptions import FetchError, NotFoundError
from ..records.model import AttendanceRecord
from ..records.repository import AttendanceSource
from ..summary.aggregator import aggregate_duration, aggregate_status
from ..summary.grouper import DayPair, find_day_pair, group_by_date, pair_from_bucket
from ..summary.holiday import detect_holiday
from .state import DashboardState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayRow:
    """Read-model for one table row."""

    date: str
    has_sign_in: bool
    has_sign_out: bool
    duration: str
    status: DayStatus
    is_holiday: bool = False
    holiday_label: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "sign_in": self.has_sign_in,
            "sign_out": self.has_sign_out,
            "duration": self.duration,
            "status": self.status.value,
            "is_holiday": self.is_holiday,
            "holiday_label": self.holiday_label,
        }


class DashboardService:
    def __init__(self, source: AttendanceSource):
        self._source = source

    def load(self) -> DashboardState:
        """Fetch once and settle the view state. No retry."""
        state = DashboardState.loading()
        try:
            records = self._source.fetch_all()
        except FetchError as e:
            logger.warning("Dashboard load failed: %s", e)
            return state.reject(str(e))
        logger.info("Loaded %d attendance records", len(records))
        return state.resolve(records)

    def build_rows(self, records: Sequence[AttendanceRecord]) -> list[DayRow]:
        return [self._to_row(date, bucket) for date, bucket in group_by_date(records).items()]

    def today(self, records: Sequence[AttendanceRecord], today: str) -> Optional[DayPair]:
        pair = find_day_pair(records, today)
        return None if pair.is_empty else pair

    def day_detail(self, records: Sequence[AttendanceRecord], date: str) -> DayPair:
        pair = find_day_pair(records, date)
        if pair.is_empty:
            raise NotFoundError(f"No attendance records for {date}")
        if detect_holiday(r for r in records if r.date == date).is_holiday:
            raise NotFoundError(f"{date} is a skipped day")
        return pair

    def _to_row(self, date: str, bucket: Sequence[AttendanceRecord]) -> DayRow:
        pair = pair_from_bucket(bucket)
        holiday = detect_holiday(bucket)
        sign_in, sign_out = pair.sign_in, pair.sign_out
        return DayRow(
            date=date,
            has_sign_in=sign_in is not None,
            has_sign_out=sign_out is not None,
            duration=aggregate_duration(
                sign_in.duration if sign_in else None,
                sign_out.duration if sign_out else None,
            ),
            status=aggregate_status(
                sign_in.status if sign_in else None,
                sign_out.status if sign_out else None,
            ),
            is_holiday=holiday.is_holiday,
            holiday_label=holiday.label,
        )
