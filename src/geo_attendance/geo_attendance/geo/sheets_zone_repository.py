from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional, Sequence

from ..core.constants import DEFAULT_ZONE_RADIUS_KM
from ..core.exceptions import ValidationError
from ..sheets.base import cell, fetch_records, sheets_call
from ..sheets.connection import SpreadsheetConnection
from .model import Zone
from .repository import ZoneRepository

logger = logging.getLogger(__name__)

COL_NAME = "Location Name"
COL_LATITUDE = "Latitude"
COL_LONGITUDE = "Longitude"
COL_RADIUS = "Radius (km)"


def _parse_radius(value: str) -> float:
    try:
        radius = float(value)
    except ValueError:
        return DEFAULT_ZONE_RADIUS_KM
    return radius or DEFAULT_ZONE_RADIUS_KM


class SheetsZoneRepository(ZoneRepository):
    """Zones from the "Locations" tab of the staff spreadsheet."""

    def __init__(self, conn: SpreadsheetConnection, *, spreadsheet_id: str, title: str = "Locations"):
        self._conn = conn
        self._spreadsheet_id = spreadsheet_id
        self._title = title

    def list_zones(self) -> Sequence[Zone]:
        with sheets_call("zone lookup"):
            rows = fetch_records(self._conn.worksheet(self._spreadsheet_id, self._title))

        zones: list[Zone] = []
        for row_number, r in rows:
            name = cell(r, COL_NAME)
            try:
                zones.append(
                    Zone(
                        name=name,
                        latitude=float(cell(r, COL_LATITUDE)),
                        longitude=float(cell(r, COL_LONGITUDE)),
                        radius_km=_parse_radius(cell(r, COL_RADIUS)),
                    )
                )
            except (ValueError, ValidationError) as e:
                logger.warning("Skipping location row %d (%r): %s", row_number, name, e)
        return zones


class CachedZoneRepository(ZoneRepository):
    """Per-process read-through cache over another zone source.

    ``ttl_seconds=0`` caches for the lifetime of the process; a positive value
    re-fetches once the cached list is older than that.
    """

    def __init__(
        self,
        inner: ZoneRepository,
        *,
        ttl_seconds: float = 0,
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl_seconds < 0:
            raise ValidationError("ttl_seconds must be >= 0")
        self._inner = inner
        self._ttl = float(ttl_seconds)
        self._clock = clock
        self._zones: Optional[Sequence[Zone]] = None
        self._loaded_at = 0.0
        self._lock = threading.Lock()

    def _is_fresh(self) -> bool:
        if self._zones is None:
            return False
        return not self._ttl or self._clock() - self._loaded_at < self._ttl

    def list_zones(self) -> Sequence[Zone]:
        with self._lock:
            if not self._is_fresh():
                self._zones = tuple(self._inner.list_zones())
                self._loaded_at = self._clock()
                logger.info("Loaded %d zones", len(self._zones))
            return self._zones

    def invalidate(self) -> None:
        with self._lock:
            self._zones = None
