import math

import pytest

from src.geo_attendance.geo_attendance.core.exceptions import ValidationError
from src.geo_attendance.geo_attendance.geo.matcher import haversine_km, resolve_zone
from src.geo_attendance.geo_attendance.geo.model import Zone

HEAD_OFFICE = Zone(name="Head Office", latitude=9.4292, longitude=-1.0534, radius_km=0.15)
NYANKPALA = Zone(name="Nyankpala", latitude=9.404691157748209, longitude=-0.9838639320946208, radius_km=0.15)


def test_point_eleven_meters_away_resolves_head_office():
    assert resolve_zone(9.4293, -1.0534, [HEAD_OFFICE]) == HEAD_OFFICE


def test_point_two_km_away_resolves_none():
    assert haversine_km(9.45, -1.05, HEAD_OFFICE.latitude, HEAD_OFFICE.longitude) > 2.0
    assert resolve_zone(9.45, -1.05, [HEAD_OFFICE]) is None


def test_distance_is_symmetric():
    a = (9.4292, -1.0534)
    b = (9.404691157748209, -0.9838639320946208)
    assert haversine_km(*a, *b) == pytest.approx(haversine_km(*b, *a))
    assert haversine_km(*a, *a) == 0.0


def test_known_distance_one_degree_latitude():
    # One degree of latitude on a 6371 km sphere.
    assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(2 * math.pi * 6371 / 360)


def test_overlapping_zones_resolve_by_declaration_order_not_distance():
    wide = Zone(name="Campus", latitude=9.4300, longitude=-1.0534, radius_km=1.0)
    # The point sits on HEAD_OFFICE's center but "Campus" is declared first.
    assert resolve_zone(9.4292, -1.0534, [wide, HEAD_OFFICE]) == wide
    assert resolve_zone(9.4292, -1.0534, [HEAD_OFFICE, wide]) == HEAD_OFFICE


def test_skips_non_matching_zones_before_match():
    assert resolve_zone(9.4047, -0.9839, [HEAD_OFFICE, NYANKPALA]) == NYANKPALA


def test_empty_zone_list_resolves_none():
    assert resolve_zone(9.4292, -1.0534, []) is None


@pytest.mark.parametrize(
    "lat, lon",
    [
        (float("nan"), -1.0534),
        (9.4292, float("nan")),
        (91.0, -1.0534),
        (9.4292, 181.0),
    ],
)
def test_invalid_coordinates_match_nothing(lat, lon):
    everywhere = Zone(name="Everywhere", latitude=0.0, longitude=0.0, radius_km=30000.0)
    assert resolve_zone(lat, lon, [everywhere]) is None


def test_zone_radius_must_be_positive():
    with pytest.raises(ValidationError):
        Zone(name="Broken", latitude=0.0, longitude=0.0, radius_km=0.0)
