from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Union

from ..core.enums import ClockAction


@dataclass(frozen=True)
class AttendanceRecord:
    """One ledger row: a subject's attendance for one calendar day.

    ``time_in`` / ``time_out`` hold the ISO-8601 text written to the ledger.
    ``row_id`` is the backing store's handle for updates (sheet row number).
    """

    subject_key: str
    work_date: str
    time_in: Optional[str]
    time_out: Optional[str]
    zone: str
    department: str
    row_id: Optional[int] = None

    def with_clock_out(self, time_out: str, *, zone: str, department: str) -> "AttendanceRecord":
        return replace(self, time_out=time_out, zone=zone, department=department)


@dataclass(frozen=True)
class ClockRequest:
    action: ClockAction
    subject_identifier: str
    latitude: float
    longitude: float
    timestamp: datetime


@dataclass(frozen=True)
class ClockResult:
    success: bool
    message: str

    def to_dict(self) -> dict:
        return {"success": self.success, "message": self.message}


@dataclass(frozen=True)
class Authorized:
    pass


@dataclass(frozen=True)
class Denied:
    reason: str


@dataclass(frozen=True)
class NewRecord:
    record: AttendanceRecord


@dataclass(frozen=True)
class UpdatedRecord:
    record: AttendanceRecord


@dataclass(frozen=True)
class Rejected:
    reason: str


AuthorizationResult = Union[Authorized, Denied]
TransitionResult = Union[NewRecord, UpdatedRecord, Rejected]
