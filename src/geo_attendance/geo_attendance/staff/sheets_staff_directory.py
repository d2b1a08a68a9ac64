from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import DEFAULT_DEPARTMENT
from ..sheets.base import cell, fetch_records, sheets_call
from ..sheets.connection import SpreadsheetConnection
from .model import StaffRecord
from .repository import StaffDirectory

logger = logging.getLogger(__name__)

COL_NAME = "Name"
COL_USER_ID = "User ID"
COL_ACTIVE = "Active"
COL_DEPARTMENT = "Department"
COL_ALLOWED = "Allowed Locations"


def parse_allowed_zones(value: str) -> frozenset[str]:
    return frozenset(part.strip() for part in value.split(",") if part.strip())


class SheetsStaffDirectory(StaffDirectory):
    def __init__(self, conn: SpreadsheetConnection, *, spreadsheet_id: str, title: str = "Staff Sheet"):
        self._conn = conn
        self._spreadsheet_id = spreadsheet_id
        self._title = title

    def find_active(self, identifier: str) -> Optional[StaffRecord]:
        wanted = (identifier or "").strip()
        if not wanted:
            return None

        with sheets_call("staff lookup"):
            rows = fetch_records(self._conn.worksheet(self._spreadsheet_id, self._title))

        for _, r in rows:
            if wanted not in (cell(r, COL_NAME), cell(r, COL_USER_ID)):
                continue
            if cell(r, COL_ACTIVE).lower() != "yes":
                continue
            return StaffRecord(
                name=cell(r, COL_NAME),
                active=True,
                department=cell(r, COL_DEPARTMENT) or DEFAULT_DEPARTMENT,
                allowed_zones=parse_allowed_zones(cell(r, COL_ALLOWED)),
                staff_id=cell(r, COL_USER_ID) or None,
            )

        logger.info("No active staff row for %r", wanted)
        return None
