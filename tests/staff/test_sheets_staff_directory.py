from __future__ import annotations

from src.geo_attendance.geo_attendance.staff.sheets_staff_directory import SheetsStaffDirectory, parse_allowed_zones


class FakeWorksheet:
    def __init__(self, records):
        self.records = records

    def get_all_records(self, head=1, numericise_ignore=None):
        return list(self.records)


class FakeConnection:
    def __init__(self, ws):
        self.ws = ws

    def worksheet(self, spreadsheet_id, title):
        assert title == "Staff Sheet"
        return self.ws


ROWS = [
    {"Name": "Kofi", "User ID": "EMP-002", "Active": "No", "Department": "IT", "Allowed Locations": "Head Office"},
    {
        "Name": "Ama",
        "User ID": "EMP-001",
        "Active": "Yes",
        "Department": "Finance",
        "Allowed Locations": "Head Office, Nyankpala ,",
    },
    {"Name": "Yaw", "User ID": "", "Active": "yes", "Department": "", "Allowed Locations": ""},
]


def _directory():
    return SheetsStaffDirectory(FakeConnection(FakeWorksheet(ROWS)), spreadsheet_id="staff-sheet")


def test_find_by_name():
    staff = _directory().find_active("Ama")
    assert staff is not None
    assert staff.subject_key == "Ama"
    assert staff.staff_id == "EMP-001"
    assert staff.department == "Finance"
    assert staff.allowed_zones == frozenset({"Head Office", "Nyankpala"})


def test_find_by_user_id_resolves_same_subject():
    assert _directory().find_active(" EMP-001 ").subject_key == "Ama"


def test_inactive_staff_not_returned():
    assert _directory().find_active("Kofi") is None
    assert _directory().find_active("EMP-002") is None


def test_unknown_and_blank_identifiers():
    assert _directory().find_active("Nobody") is None
    assert _directory().find_active("") is None


def test_missing_department_defaults_to_unknown():
    staff = _directory().find_active("Yaw")
    assert staff.department == "Unknown"
    assert staff.allowed_zones == frozenset()
    assert staff.staff_id is None


def test_parse_allowed_zones():
    assert parse_allowed_zones("") == frozenset()
    assert parse_allowed_zones("A,B , C") == frozenset({"A", "B", "C"})
