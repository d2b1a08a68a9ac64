from .config import *  # noqa: F401,F403

DEBUG = False
TESTING = True

SHEETS_CONFIG = {
    "service_account_email": "test@example.iam.gserviceaccount.com",
    "private_key": "test-key",
    "staff_sheet_id": "staff-sheet",
    "attendance_sheet_id": "attendance-sheet",
}
COMPREFACE_CONFIG = {"url": "http://compreface.test", "api_key": "test-key"}

TIMEZONE = "UTC"
ZONE_CACHE_SECONDS = None
