from __future__ import annotations

from dataclasses import dataclass

from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Zone:
    """A named circular geofence around an office."""

    name: str
    latitude: float
    longitude: float
    radius_km: float

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError("Zone name is required")
        if not self.radius_km > 0:
            raise ValidationError(f"Zone {self.name!r} radius must be > 0 km")
