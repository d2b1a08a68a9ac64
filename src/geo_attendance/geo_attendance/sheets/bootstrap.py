from __future__ import annotations

import logging
from typing import Dict, Sequence

from ..attendance import sheets_ledger
from ..geo import sheets_zone_repository
from ..staff import sheets_staff_directory
from .base import sheets_call
from .connection import SpreadsheetConnection

logger = logging.getLogger(__name__)

STAFF_HEADERS = (
    sheets_staff_directory.COL_NAME,
    sheets_staff_directory.COL_USER_ID,
    sheets_staff_directory.COL_ACTIVE,
    sheets_staff_directory.COL_DEPARTMENT,
    sheets_staff_directory.COL_ALLOWED,
)
LOCATION_HEADERS = (
    sheets_zone_repository.COL_NAME,
    sheets_zone_repository.COL_LATITUDE,
    sheets_zone_repository.COL_LONGITUDE,
    sheets_zone_repository.COL_RADIUS,
)
ATTENDANCE_HEADERS = sheets_ledger.COLUMNS


def ensure_worksheet(conn: SpreadsheetConnection, spreadsheet_id: str, title: str, headers: Sequence[str]) -> bool:
    """Create ``title`` with a header row if missing; fill an empty header row.

    Returns True when something was written. Existing headers are never
    overwritten.
    """
    with sheets_call(f"bootstrap of {title!r}"):
        spreadsheet = conn.spreadsheet(spreadsheet_id)
        existing = {ws.title: ws for ws in spreadsheet.worksheets()}

        ws = existing.get(title)
        if ws is None:
            ws = spreadsheet.add_worksheet(title=title, rows=1000, cols=len(headers))
            logger.info("Created worksheet %r", title)
        elif any(v.strip() for v in ws.row_values(1)):
            return False

        ws.update(range_name="A1", values=[list(headers)], value_input_option="RAW")
        logger.info("Wrote header row for %r", title)
        return True


def ensure_all(conn: SpreadsheetConnection, titles: Dict[str, str]) -> Dict[str, bool]:
    cfg = conn.config
    plan = [
        (cfg.staff_sheet_id, titles.get("staff_title", "Staff Sheet"), STAFF_HEADERS),
        (cfg.staff_sheet_id, titles.get("locations_title", "Locations"), LOCATION_HEADERS),
        (cfg.attendance_sheet_id, titles.get("attendance_title", "Attendance Sheet"), ATTENDANCE_HEADERS),
    ]
    return {title: ensure_worksheet(conn, sheet_id, title, headers) for sheet_id, title, headers in plan}
