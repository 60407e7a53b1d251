from __future__ import annotations

import logging
from typing import Optional, Sequence

import requests

from ..core.constants import DEFAULT_REQUEST_TIMEOUT, FETCH_FAILED_MESSAGE
from ..core.exceptions import FetchError, ValidationError
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


class HttpAttendanceSource:
    """Fetches the full record list with a single GET, no paging or filters."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()

    def fetch_all(self) -> Sequence[AttendanceRecord]:
        logger.debug("GET %s", self._url)
        try:
            resp = self._session.get(self._url, headers={"Accept": "application/json"}, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.warning("Attendance fetch failed: %s", exc)
            raise FetchError(str(exc) or FETCH_FAILED_MESSAGE) from exc

        if not 200 <= resp.status_code < 300:
            logger.warning("Attendance fetch returned HTTP %s", resp.status_code)
            raise FetchError(FETCH_FAILED_MESSAGE)

        try:
            payload = resp.json()
        except ValueError as exc:
            logger.warning("Attendance response is not JSON: %s", exc)
            raise FetchError("Response is not valid JSON") from exc

        if not isinstance(payload, list):
            raise FetchError("Expected a JSON array of attendance records")

        try:
            return [AttendanceRecord.from_dict(item) for item in payload]
        except ValidationError as exc:
            logger.warning("Invalid attendance record in response: %s", exc)
            raise FetchError(f"Invalid attendance record: {exc}") from exc
