"""Pure decision rules for an attendance request.

Two questions are answered without any I/O:

- ``authorize``: may this staff member act in this zone at all?
- ``apply_transition``: given today's ledger record, is the action legal,
  and what should be written?

Per subject and day the state only moves forward::

    NO_RECORD --clock in--> CLOCKED_IN --clock out--> CLOCKED_OUT
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_timestamp
from ..core.enums import AttendanceState, ClockAction
from ..geo.model import Zone
from ..staff.model import StaffRecord
from .model import (
    AttendanceRecord,
    AuthorizationResult,
    Authorized,
    Denied,
    NewRecord,
    Rejected,
    TransitionResult,
    UpdatedRecord,
)

REASON_INACTIVE = "inactive or unknown subject"
REASON_WRONG_ZONE = "not authorized at this location"

REASON_NOT_CLOCKED_IN = "haven't clocked in yet"
REASON_ALREADY_IN = "have already clocked in today"
REASON_ALREADY_OUT = "have already clocked out today"


def authorize(staff: Optional[StaffRecord], zone: Optional[Zone], action: ClockAction) -> AuthorizationResult:
    # Same rules for both actions.
    if staff is None or not staff.active:
        return Denied(REASON_INACTIVE)
    if zone is None or zone.name not in staff.allowed_zones:
        return Denied(REASON_WRONG_ZONE)
    return Authorized()


def state_of(record: Optional[AttendanceRecord]) -> AttendanceState:
    if record is None or not record.time_in:
        return AttendanceState.NO_RECORD
    if record.time_out:
        return AttendanceState.CLOCKED_OUT
    return AttendanceState.CLOCKED_IN


def apply_transition(
    existing: Optional[AttendanceRecord],
    action: ClockAction,
    timestamp: datetime,
    *,
    subject_key: str,
    work_date: str,
    zone: str,
    department: str,
) -> TransitionResult:
    state = state_of(existing)
    stamp = format_timestamp(timestamp)

    if action == ClockAction.CLOCK_IN:
        if state != AttendanceState.NO_RECORD:
            return Rejected(REASON_ALREADY_IN)
        return NewRecord(
            AttendanceRecord(
                subject_key=subject_key,
                work_date=work_date,
                time_in=stamp,
                time_out=None,
                zone=zone,
                department=department,
            )
        )

    if state == AttendanceState.NO_RECORD:
        return Rejected(REASON_NOT_CLOCKED_IN)
    if state == AttendanceState.CLOCKED_OUT:
        return Rejected(REASON_ALREADY_OUT)
    return UpdatedRecord(existing.with_clock_out(stamp, zone=zone, department=department))
