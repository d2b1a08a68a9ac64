from __future__ import annotations

import logging
from datetime import tzinfo

from ..common.datetime_utils import format_clock_time, work_date_of
from ..core.enums import ClockAction
from ..core.exceptions import AuthorizationDenied
from ..geo.matcher import resolve_zone
from ..geo.repository import ZoneRepository
from ..staff.repository import StaffDirectory
from .decision import REASON_WRONG_ZONE, apply_transition, authorize
from .locks import SubjectLocks
from .model import ClockRequest, ClockResult, Denied, NewRecord, Rejected, UpdatedRecord
from .repository import AttendanceLedger

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        ledger: AttendanceLedger,
        staff: StaffDirectory,
        zones: ZoneRepository,
        *,
        locks: SubjectLocks,
        tz: tzinfo,
    ):
        self._ledger = ledger
        self._staff = staff
        self._zones = zones
        self._locks = locks
        self._tz = tz

    def clock(self, req: ClockRequest) -> ClockResult:
        """Authorize and record one clock-in / clock-out.

        Raises ``AuthorizationDenied`` for inactive staff or a zone outside the
        staff member's allow-list. An illegal transition (double clock-in,
        clock-out without clock-in) is not an error: it comes back as
        ``ClockResult(success=False)``.
        """
        logger.info("Attendance request: %s | %s", req.action.value, req.subject_identifier)

        staff = self._staff.find_active(req.subject_identifier)
        zone = resolve_zone(req.latitude, req.longitude, self._zones.list_zones())

        decision = authorize(staff, zone, req.action)
        if isinstance(decision, Denied):
            logger.info(
                "Denied %s for %s at (%s, %s): %s",
                req.action.value, req.subject_identifier, req.latitude, req.longitude, decision.reason,
            )
            if decision.reason == REASON_WRONG_ZONE:
                where = zone.name if zone else "this location"
                raise AuthorizationDenied(f"Not authorized to {req.action.value} at {where}.")
            raise AuthorizationDenied("Staff not found or inactive.")

        name = staff.subject_key
        work_date = work_date_of(req.timestamp, tz=self._tz)

        with self._locks.hold(name):
            existing = self._ledger.find_for_date(name, work_date)
            outcome = apply_transition(
                existing,
                req.action,
                req.timestamp,
                subject_key=name,
                work_date=work_date,
                zone=zone.name,
                department=staff.department,
            )

            if isinstance(outcome, Rejected):
                logger.info("Rejected %s for %s on %s: %s", req.action.value, name, work_date, outcome.reason)
                return ClockResult(success=False, message=f"Dear {name}, you {outcome.reason}.")

            if isinstance(outcome, NewRecord):
                self._ledger.append(outcome.record)
            elif isinstance(outcome, UpdatedRecord):
                self._ledger.update(outcome.record)

        verb = "clocked in" if req.action == ClockAction.CLOCK_IN else "clocked out"
        at = format_clock_time(req.timestamp, tz=self._tz)
        logger.info("%s %s at %s in %s", name, verb, at, zone.name)
        return ClockResult(
            success=True,
            message=f"Dear {name}, you have successfully {verb} at {at} in {zone.name}.",
        )
