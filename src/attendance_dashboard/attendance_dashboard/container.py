from __future__ import annotations

from dataclasses import dataclass

from .dashboard.service import DashboardService
from .records.http_source import HttpAttendanceSource
from .records.repository import AttendanceSource


@dataclass(frozen=True)
class Container:
    source: AttendanceSource
    dashboard_service: DashboardService


def build_container(*, api_url: str, timeout: float, source: AttendanceSource | None = None) -> Container:
    source = source or HttpAttendanceSource(api_url, timeout=timeout)
    return Container(source=source, dashboard_service=DashboardService(source))
