from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt
from typing import Iterable, Optional

from ..core.constants import EARTH_RADIUS_KM
from .model import Zone


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    φ1, φ2 = radians(lat1), radians(lat2)
    Δφ = radians(lat2 - lat1)
    Δλ = radians(lon2 - lon1)

    a = sin(Δφ / 2) ** 2 + cos(φ1) * cos(φ2) * sin(Δλ / 2) ** 2
    return 2 * EARTH_RADIUS_KM * atan2(sqrt(a), sqrt(1 - a))


def is_valid_coordinate(lat: float, lon: float) -> bool:
    # NaN fails both comparisons.
    return -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0


def resolve_zone(lat: float, lon: float, zones: Iterable[Zone]) -> Optional[Zone]:
    """Return the first zone, in declaration order, whose radius covers (lat, lon).

    Overlapping zones are resolved by list order, not by nearest center.
    """
    if not is_valid_coordinate(lat, lon):
        return None

    for zone in zones:
        if haversine_km(lat, lon, zone.latitude, zone.longitude) <= zone.radius_km:
            return zone
    return None
