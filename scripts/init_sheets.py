from __future__ import annotations

import sys
from pathlib import Path

import importlib

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.geo_attendance.geo_attendance.sheets.bootstrap import ensure_all
from src.geo_attendance.geo_attendance.sheets.connection import SheetsConfig, SpreadsheetConnection


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    sheets_config = dict(settings.SHEETS_CONFIG)

    conn = SpreadsheetConnection.get_instance(
        SheetsConfig(
            service_account_email=sheets_config["service_account_email"],
            private_key=sheets_config["private_key"],
            staff_sheet_id=sheets_config["staff_sheet_id"],
            attendance_sheet_id=sheets_config["attendance_sheet_id"],
            timeout_seconds=float(settings.REQUEST_TIMEOUT_SECONDS),
        )
    )
    for title, written in ensure_all(conn, sheets_config).items():
        print(f"{'OK: initialized' if written else 'OK: unchanged'} -> {title}")


if __name__ == "__main__":
    main()
