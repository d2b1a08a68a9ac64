from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from .attendance.locks import SubjectLocks
from .attendance.repository import AttendanceLedger
from .attendance.service import AttendanceService
from .attendance.sheets_ledger import SheetsAttendanceLedger
from .common.datetime_utils import get_zone
from .core.constants import DEFAULT_REQUEST_TIMEOUT_SECONDS, DEFAULT_SIMILARITY_THRESHOLD
from .geo.repository import ZoneRepository
from .geo.sheets_zone_repository import CachedZoneRepository, SheetsZoneRepository
from .recognition.compreface_client import CompreFaceClient
from .recognition.service import FaceRecognizer, RecognitionService
from .sheets.connection import SheetsConfig, SpreadsheetConnection
from .staff.repository import StaffDirectory
from .staff.sheets_staff_directory import SheetsStaffDirectory


@dataclass(frozen=True)
class Container:
    tz: tzinfo

    zones_repo: ZoneRepository
    staff_directory: StaffDirectory
    attendance_ledger: AttendanceLedger
    face_recognizer: FaceRecognizer

    attendance_service: AttendanceService
    recognition_service: RecognitionService


def assemble(
    *,
    zones_repo: ZoneRepository,
    staff_directory: StaffDirectory,
    attendance_ledger: AttendanceLedger,
    face_recognizer: FaceRecognizer,
    tz: tzinfo,
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
) -> Container:
    """Wire services over already-built collaborators (used by tests too)."""
    attendance_service = AttendanceService(
        attendance_ledger,
        staff_directory,
        zones_repo,
        locks=SubjectLocks(timeout_seconds=timeout_seconds),
        tz=tz,
    )
    recognition_service = RecognitionService(face_recognizer, threshold=similarity_threshold)

    return Container(
        tz=tz,
        zones_repo=zones_repo,
        staff_directory=staff_directory,
        attendance_ledger=attendance_ledger,
        face_recognizer=face_recognizer,
        attendance_service=attendance_service,
        recognition_service=recognition_service,
    )


def build_container(
    *,
    sheets_config: dict,
    compreface_config: dict,
    timezone_name: str = "UTC",
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
    zone_cache_seconds: Optional[float] = None,
) -> Container:
    config = SheetsConfig(
        service_account_email=str(sheets_config["service_account_email"]),
        private_key=str(sheets_config["private_key"]),
        staff_sheet_id=str(sheets_config["staff_sheet_id"]),
        attendance_sheet_id=str(sheets_config["attendance_sheet_id"]),
        timeout_seconds=float(timeout_seconds),
    )
    conn = SpreadsheetConnection.get_instance(config)

    zones_repo: ZoneRepository = SheetsZoneRepository(
        conn,
        spreadsheet_id=config.staff_sheet_id,
        title=sheets_config.get("locations_title", "Locations"),
    )
    if zone_cache_seconds is not None:
        zones_repo = CachedZoneRepository(zones_repo, ttl_seconds=float(zone_cache_seconds))

    staff_directory = SheetsStaffDirectory(
        conn,
        spreadsheet_id=config.staff_sheet_id,
        title=sheets_config.get("staff_title", "Staff Sheet"),
    )
    attendance_ledger = SheetsAttendanceLedger(
        conn,
        spreadsheet_id=config.attendance_sheet_id,
        title=sheets_config.get("attendance_title", "Attendance Sheet"),
    )
    face_client = CompreFaceClient(
        str(compreface_config["url"]),
        str(compreface_config["api_key"]),
        timeout_seconds=timeout_seconds,
    )

    return assemble(
        zones_repo=zones_repo,
        staff_directory=staff_directory,
        attendance_ledger=attendance_ledger,
        face_recognizer=face_client,
        tz=get_zone(timezone_name),
        similarity_threshold=similarity_threshold,
        timeout_seconds=timeout_seconds,
    )
