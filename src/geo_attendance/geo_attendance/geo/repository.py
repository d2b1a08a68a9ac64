from __future__ import annotations

from typing import Protocol, Sequence

from .model import Zone


class ZoneRepository(Protocol):
    """Source of office zones, in declaration order."""

    def list_zones(self) -> Sequence[Zone]:
        raise NotImplementedError
