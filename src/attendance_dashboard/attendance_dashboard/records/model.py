from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from ..common.validators import optional_number, optional_str, require_mapping, require_non_empty
from ..core.enums import Seq
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class LogEntry:
    """One step of an automated sign-in/sign-out run."""

    at: str
    msg: str

    @classmethod
    def from_dict(cls, payload: Any) -> "LogEntry":
        data = require_mapping(payload, "log entry")
        return cls(at=str(data.get("at") or ""), msg=str(data.get("msg") or ""))


@dataclass(frozen=True)
class AttendanceRecord:
    """One sign-in or sign-out attempt for one date.

    Records are built once from the upstream payload and only ever read.
    ``id`` is opaque: either a plain string or a ``{"$oid": ...}`` object.
    """

    id: Union[str, Mapping[str, Any], None]
    user: Optional[str]
    date: str
    seq: Seq
    log: tuple[LogEntry, ...] = field(default_factory=tuple)
    status: Optional[str] = None
    duration: Optional[float] = None
    error: Optional[str] = None
    at: Optional[str] = None

    @property
    def record_id(self) -> Optional[str]:
        if isinstance(self.id, Mapping):
            oid = self.id.get("$oid")
            return None if oid is None else str(oid)
        return self.id

    @classmethod
    def from_dict(cls, payload: Any) -> "AttendanceRecord":
        data = require_mapping(payload, "attendance record")

        raw_seq = data.get("seq")
        try:
            seq = Seq(raw_seq)
        except ValueError:
            raise ValidationError(f"seq {raw_seq!r} is not one of 'Sign In'/'Sign Out'") from None

        raw_log = data.get("log") or []
        if not isinstance(raw_log, list):
            raise ValidationError("log must be a list")

        raw_id = data.get("_id", data.get("id"))
        if raw_id is not None and not isinstance(raw_id, Mapping):
            raw_id = str(raw_id)

        return cls(
            id=raw_id,
            user=optional_str(data, "user"),
            date=require_non_empty(data, "date"),
            seq=seq,
            log=tuple(LogEntry.from_dict(e) for e in raw_log),
            status=optional_str(data, "status"),
            duration=optional_number(data, "duration"),
            error=optional_str(data, "error"),
            at=optional_str(data, "at"),
        )
