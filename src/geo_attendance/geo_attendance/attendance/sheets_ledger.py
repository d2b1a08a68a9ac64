from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from gspread.utils import rowcol_to_a1

from ..sheets.base import cell, fetch_records, sheets_call
from ..sheets.connection import SpreadsheetConnection
from .model import AttendanceRecord
from .repository import AttendanceLedger

logger = logging.getLogger(__name__)

COL_NAME = "Name"
COL_TIME_IN = "Time In"
COL_TIME_OUT = "Time Out"
COL_LOCATION = "Location"
COL_DEPARTMENT = "Department"
COL_DATE = "Date"

COLUMNS = (COL_NAME, COL_TIME_IN, COL_TIME_OUT, COL_LOCATION, COL_DEPARTMENT, COL_DATE)


def record_date(r: Dict[str, Any]) -> str:
    # Rows written before the Date column existed only carry the ISO time-in.
    return cell(r, COL_DATE) or cell(r, COL_TIME_IN)[:10]


def to_row(record: AttendanceRecord) -> list[str]:
    return [
        record.subject_key,
        record.time_in or "",
        record.time_out or "",
        record.zone,
        record.department,
        record.work_date,
    ]


def from_row(row_number: int, r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        subject_key=cell(r, COL_NAME),
        work_date=record_date(r),
        time_in=cell(r, COL_TIME_IN) or None,
        time_out=cell(r, COL_TIME_OUT) or None,
        zone=cell(r, COL_LOCATION),
        department=cell(r, COL_DEPARTMENT),
        row_id=row_number,
    )


class SheetsAttendanceLedger(AttendanceLedger):
    """Ledger on the "Attendance Sheet" tab.

    Columns: Name, Time In, Time Out, Location, Department, Date.
    """

    def __init__(self, conn: SpreadsheetConnection, *, spreadsheet_id: str, title: str = "Attendance Sheet"):
        self._conn = conn
        self._spreadsheet_id = spreadsheet_id
        self._title = title

    def _worksheet(self):
        return self._conn.worksheet(self._spreadsheet_id, self._title)

    def find_for_date(self, subject_key: str, work_date: str) -> Optional[AttendanceRecord]:
        with sheets_call("attendance lookup"):
            rows = fetch_records(self._worksheet())

        for row_number, r in rows:
            if cell(r, COL_NAME) == subject_key and record_date(r) == work_date:
                return from_row(row_number, r)
        return None

    def append(self, record: AttendanceRecord) -> None:
        with sheets_call("attendance append"):
            self._worksheet().append_row(to_row(record), value_input_option="RAW")
        logger.info("Appended attendance row for %s on %s", record.subject_key, record.work_date)

    def update(self, record: AttendanceRecord) -> None:
        if record.row_id is None:
            raise ValueError("Cannot update an attendance record that was never stored")

        start = rowcol_to_a1(record.row_id, 1)
        end = rowcol_to_a1(record.row_id, len(COLUMNS))
        with sheets_call("attendance update"):
            self._worksheet().update(
                range_name=f"{start}:{end}",
                values=[to_row(record)],
                value_input_option="RAW",
            )
        logger.info("Updated attendance row %d for %s", record.row_id, record.subject_key)
