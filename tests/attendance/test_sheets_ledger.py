from __future__ import annotations

import gspread
import pytest

from src.geo_attendance.geo_attendance.attendance.model import AttendanceRecord
from src.geo_attendance.geo_attendance.attendance.sheets_ledger import SheetsAttendanceLedger
from src.geo_attendance.geo_attendance.core.exceptions import DownstreamFailure


class FakeWorksheet:
    def __init__(self, records):
        self.records = records
        self.appended = []
        self.updates = []

    def get_all_records(self, head=1, numericise_ignore=None):
        return list(self.records)

    def append_row(self, values, value_input_option=None):
        self.appended.append((values, value_input_option))

    def update(self, range_name=None, values=None, value_input_option=None):
        self.updates.append((range_name, values, value_input_option))


class BrokenWorksheet(FakeWorksheet):
    def get_all_records(self, head=1, numericise_ignore=None):
        raise gspread.exceptions.GSpreadException("quota exceeded")


class FakeConnection:
    def __init__(self, ws):
        self.ws = ws

    def worksheet(self, spreadsheet_id, title):
        assert (spreadsheet_id, title) == ("attendance-sheet", "Attendance Sheet")
        return self.ws


def _row(name, time_in, time_out="", location="Head Office", department="Finance", date=""):
    return {
        "Name": name,
        "Time In": time_in,
        "Time Out": time_out,
        "Location": location,
        "Department": department,
        "Date": date,
    }


def _ledger(ws):
    return SheetsAttendanceLedger(FakeConnection(ws), spreadsheet_id="attendance-sheet")


def test_find_matches_subject_and_date():
    ws = FakeWorksheet(
        [
            _row("Kofi", "2026-02-01T08:00:00.000Z", date="2026-02-01"),
            _row("Ama", "2026-01-31T08:00:00.000Z", date="2026-01-31"),
            _row("Ama", "2026-02-01T08:10:00.000Z", date="2026-02-01"),
        ]
    )

    record = _ledger(ws).find_for_date("Ama", "2026-02-01")

    assert record is not None
    assert record.row_id == 4
    assert record.time_in == "2026-02-01T08:10:00.000Z"
    assert record.time_out is None


def test_find_falls_back_to_time_in_prefix_when_date_blank():
    ws = FakeWorksheet([_row("Ama", "2026-02-01T08:10:00.000Z", "2026-02-01T17:00:00.000Z")])

    record = _ledger(ws).find_for_date("Ama", "2026-02-01")

    assert record.work_date == "2026-02-01"
    assert record.time_out == "2026-02-01T17:00:00.000Z"


def test_find_returns_none_when_absent():
    assert _ledger(FakeWorksheet([])).find_for_date("Ama", "2026-02-01") is None


def test_append_writes_full_row_in_column_order():
    ws = FakeWorksheet([])
    record = AttendanceRecord("Ama", "2026-02-01", "2026-02-01T08:10:00.000Z", None, "Head Office", "Finance")

    _ledger(ws).append(record)

    assert ws.appended == [
        (["Ama", "2026-02-01T08:10:00.000Z", "", "Head Office", "Finance", "2026-02-01"], "RAW"),
    ]


def test_update_rewrites_whole_row_in_one_call():
    ws = FakeWorksheet([])
    record = AttendanceRecord(
        "Ama", "2026-02-01", "2026-02-01T08:10:00.000Z", "2026-02-01T17:00:00.000Z", "Head Office", "Finance", row_id=4
    )

    _ledger(ws).update(record)

    assert ws.updates == [
        (
            "A4:F4",
            [["Ama", "2026-02-01T08:10:00.000Z", "2026-02-01T17:00:00.000Z", "Head Office", "Finance", "2026-02-01"]],
            "RAW",
        )
    ]


def test_update_requires_stored_record():
    record = AttendanceRecord("Ama", "2026-02-01", "x", "y", "Head Office", "Finance")
    with pytest.raises(ValueError):
        _ledger(FakeWorksheet([])).update(record)


def test_spreadsheet_errors_become_downstream_failures():
    with pytest.raises(DownstreamFailure):
        _ledger(BrokenWorksheet([])).find_for_date("Ama", "2026-02-01")
