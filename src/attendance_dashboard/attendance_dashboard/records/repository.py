from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceSource(Protocol):
    def fetch_all(self) -> Sequence[AttendanceRecord]:
        """Return every record the upstream service knows about.

        Raises ``FetchError`` when the records cannot be obtained.
        """

        raise NotImplementedError
