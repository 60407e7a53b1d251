from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..core.enums import ViewState
from ..core.exceptions import InvalidTransitionError
from ..records.model import AttendanceRecord


@dataclass(frozen=True)
class DashboardState:
    """Loading -> Ready(records) | Error(message).

    Only a LOADING state can move on, and only once: the fetch either
    resolves or rejects it. READY and ERROR are final for a page view.
    """

    kind: ViewState
    records: tuple[AttendanceRecord, ...] = field(default_factory=tuple)
    message: Optional[str] = None

    @classmethod
    def loading(cls) -> "DashboardState":
        return cls(kind=ViewState.LOADING)

    def resolve(self, records: Sequence[AttendanceRecord]) -> "DashboardState":
        self._require_loading("resolve")
        return DashboardState(kind=ViewState.READY, records=tuple(records))

    def reject(self, message: str) -> "DashboardState":
        self._require_loading("reject")
        return DashboardState(kind=ViewState.ERROR, message=message)

    @property
    def is_loading(self) -> bool:
        return self.kind is ViewState.LOADING

    @property
    def is_ready(self) -> bool:
        return self.kind is ViewState.READY

    @property
    def is_error(self) -> bool:
        return self.kind is ViewState.ERROR

    @property
    def is_empty(self) -> bool:
        return self.is_ready and not self.records

    def _require_loading(self, action: str) -> None:
        if self.kind is not ViewState.LOADING:
            raise InvalidTransitionError(f"cannot {action} a {self.kind.value} state")
