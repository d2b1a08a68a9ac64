from __future__ import annotations

from src.geo_attendance.geo_attendance.geo.model import Zone
from src.geo_attendance.geo_attendance.geo.sheets_zone_repository import CachedZoneRepository, SheetsZoneRepository


class FakeWorksheet:
    def __init__(self, records):
        self.records = records

    def get_all_records(self, head=1, numericise_ignore=None):
        return list(self.records)


class FakeConnection:
    def __init__(self, worksheets):
        self.worksheets = worksheets
        self.opened = []

    def worksheet(self, spreadsheet_id, title):
        self.opened.append((spreadsheet_id, title))
        return self.worksheets[title]


class CountingZones:
    def __init__(self):
        self.calls = 0

    def list_zones(self):
        self.calls += 1
        return [Zone(name=f"Z{self.calls}", latitude=0.0, longitude=0.0, radius_km=1.0)]


def test_sheets_zones_keep_order_and_default_radius():
    ws = FakeWorksheet(
        [
            {"Location Name": "Head Office", "Latitude": "9.4292", "Longitude": "-1.0534", "Radius (km)": "0.2"},
            {"Location Name": "Nyankpala", "Latitude": "9.4047", "Longitude": "-0.9839", "Radius (km)": ""},
        ]
    )
    conn = FakeConnection({"Locations": ws})
    repo = SheetsZoneRepository(conn, spreadsheet_id="staff-sheet")

    zones = repo.list_zones()

    assert [z.name for z in zones] == ["Head Office", "Nyankpala"]
    assert zones[0].radius_km == 0.2
    assert zones[1].radius_km == 0.15
    assert conn.opened == [("staff-sheet", "Locations")]


def test_sheets_zones_skip_unparsable_rows():
    ws = FakeWorksheet(
        [
            {"Location Name": "", "Latitude": "1", "Longitude": "1", "Radius (km)": "1"},
            {"Location Name": "Bad", "Latitude": "north", "Longitude": "1", "Radius (km)": "1"},
            {"Location Name": "Good", "Latitude": "1", "Longitude": "1", "Radius (km)": "1"},
        ]
    )
    repo = SheetsZoneRepository(FakeConnection({"Locations": ws}), spreadsheet_id="s")

    assert [z.name for z in repo.list_zones()] == ["Good"]


def test_cache_forever_fetches_once():
    inner = CountingZones()
    repo = CachedZoneRepository(inner, ttl_seconds=0)

    first = repo.list_zones()
    second = repo.list_zones()

    assert inner.calls == 1
    assert first == second


def test_cache_revalidates_after_ttl():
    now = [100.0]
    inner = CountingZones()
    repo = CachedZoneRepository(inner, ttl_seconds=60, clock=lambda: now[0])

    assert repo.list_zones()[0].name == "Z1"
    now[0] += 59
    assert repo.list_zones()[0].name == "Z1"
    now[0] += 2
    assert repo.list_zones()[0].name == "Z2"


def test_invalidate_forces_refetch():
    inner = CountingZones()
    repo = CachedZoneRepository(inner, ttl_seconds=0)
    repo.list_zones()
    repo.invalidate()
    repo.list_zones()
    assert inner.calls == 2
