from __future__ import annotations

from typing import Optional, Protocol

from .model import StaffRecord


class StaffDirectory(Protocol):
    """Giao diện tra cứu nhân viên.

    ``identifier`` may be either the staff name or the user id; the directory
    resolves both aliases so callers only deal with ``StaffRecord.subject_key``.
    """

    def find_active(self, identifier: str) -> Optional[StaffRecord]:
        raise NotImplementedError
