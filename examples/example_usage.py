"""Example: use the service layer without Flask.

Fetches the records once and prints one line per day, like the dashboard table.
"""

import importlib

from config import get_settings_module

from src.attendance_dashboard.attendance_dashboard.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_url=settings.ATTENDANCE_API_URL, timeout=settings.REQUEST_TIMEOUT)
    service = container.dashboard_service

    state = service.load()
    if state.is_error:
        print("error:", state.message)
        return
    for row in service.build_rows(state.records):
        if row.is_holiday:
            print(row.date, "holiday", row.holiday_label or "")
        else:
            print(row.date, row.duration, row.status.value)


if __name__ == "__main__":
    main()
