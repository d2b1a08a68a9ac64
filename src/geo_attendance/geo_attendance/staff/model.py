from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional


@dataclass(frozen=True)
class StaffRecord:
    """A staff member as seen by the attendance core (read-only).

    ``name`` is the canonical subject key written to the ledger; ``staff_id``
    is the alternate identifier some clients send instead.
    """

    name: str
    active: bool
    department: str
    allowed_zones: FrozenSet[str] = field(default_factory=frozenset)
    staff_id: Optional[str] = None

    @property
    def subject_key(self) -> str:
        return self.name
