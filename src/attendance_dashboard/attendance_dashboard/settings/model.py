from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class NotificationSettings:
    """Reminder windows and skip-days picked in the settings panel.

    Local to the page; nothing here is ever submitted.
    """

    log_in_time: str = "11:00"
    log_in_period: str = "AM"
    log_out_time: str = "18:00"
    log_out_period: str = "PM"
    notify: bool = True
    selected_days: tuple[int, ...] = field(default_factory=tuple)

    @property
    def log_in_label(self) -> str:
        return f"{self.log_in_time} {self.log_in_period}"

    @property
    def log_out_label(self) -> str:
        return f"{self.log_out_time} {self.log_out_period}"

    def toggle_day(self, day: int) -> "NotificationSettings":
        if day in self.selected_days:
            days = tuple(d for d in self.selected_days if d != day)
        else:
            days = self.selected_days + (day,)
        return replace(self, selected_days=days)

    def toggle_notify(self) -> "NotificationSettings":
        return replace(self, notify=not self.notify)
