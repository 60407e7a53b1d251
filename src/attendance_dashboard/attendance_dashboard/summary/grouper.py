from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..core.enums import Seq
from ..records.model import AttendanceRecord


@dataclass(frozen=True)
class DayPair:
    sign_in: Optional[AttendanceRecord]
    sign_out: Optional[AttendanceRecord]

    @property
    def is_empty(self) -> bool:
        return self.sign_in is None and self.sign_out is None


def _first(records: Iterable[AttendanceRecord], *, seq: Seq, date: Optional[str] = None) -> Optional[AttendanceRecord]:
    for r in records:
        if r.seq == seq and (date is None or r.date == date):
            return r
    return None


def group_by_date(records: Sequence[AttendanceRecord]) -> dict[str, list[AttendanceRecord]]:
    """Bucket records by ``date``.

    The input is walked from the end, so both the key order and each bucket's
    order are reverse input order (newest first for a chronological feed).
    """
    buckets: dict[str, list[AttendanceRecord]] = {}
    for r in reversed(records):
        buckets.setdefault(r.date, []).append(r)
    return buckets


def pair_from_bucket(bucket: Sequence[AttendanceRecord]) -> DayPair:
    """First Sign In and first Sign Out of one bucket."""
    return DayPair(sign_in=_first(bucket, seq=Seq.SIGN_IN), sign_out=_first(bucket, seq=Seq.SIGN_OUT))


def find_day_pair(records: Sequence[AttendanceRecord], date: str) -> DayPair:
    """Scan the flat list forward for the first Sign In / Sign Out on ``date``."""
    return DayPair(
        sign_in=_first(records, seq=Seq.SIGN_IN, date=date),
        sign_out=_first(records, seq=Seq.SIGN_OUT, date=date),
    )
