"""Settings shared by every environment; all secrets and endpoints come from env vars."""

import os


def _optional_float(name: str):
    value = os.getenv(name, "").strip()
    return float(value) if value else None


SHEETS_CONFIG = {
    "service_account_email": os.getenv("GOOGLE_SERVICE_ACCOUNT_EMAIL", ""),
    "private_key": os.getenv("GOOGLE_PRIVATE_KEY", ""),
    "staff_sheet_id": os.getenv("STAFF_SHEET_ID", ""),
    "attendance_sheet_id": os.getenv("ATTENDANCE_SHEET_ID", ""),
    "staff_title": os.getenv("STAFF_SHEET_TITLE", "Staff Sheet"),
    "locations_title": os.getenv("LOCATIONS_SHEET_TITLE", "Locations"),
    "attendance_title": os.getenv("ATTENDANCE_SHEET_TITLE", "Attendance Sheet"),
}

COMPREFACE_CONFIG = {
    "url": os.getenv("COMPREFACE_URL", "http://localhost:8000"),
    "api_key": os.getenv("COMPREFACE_API_KEY", ""),
}

SIMILARITY_THRESHOLD = float(os.getenv("SIMILARITY_THRESHOLD", "0.8"))
REQUEST_TIMEOUT_SECONDS = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "10"))
TIMEZONE = os.getenv("TIMEZONE", "UTC")

# Unset: re-read zones on every request. 0: cache for the process lifetime.
ZONE_CACHE_SECONDS = _optional_float("ZONE_CACHE_SECONDS")

MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(10 * 1024 * 1024)))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
