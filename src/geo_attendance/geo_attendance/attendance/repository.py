from __future__ import annotations

from typing import Optional, Protocol

from .model import AttendanceRecord


class AttendanceLedger(Protocol):
    """Append/update store of daily attendance rows keyed by (subject, date).

    The backing store has no uniqueness constraint or transactions; callers
    serialize the find -> append/update sequence per subject
    (see ``SubjectLocks``).
    """

    def find_for_date(self, subject_key: str, work_date: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def append(self, record: AttendanceRecord) -> None:
        raise NotImplementedError

    def update(self, record: AttendanceRecord) -> None:
        """Rewrite the whole record in a single write."""

        raise NotImplementedError
