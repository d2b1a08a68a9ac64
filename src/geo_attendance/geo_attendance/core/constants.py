"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_KM = 6371.0
DEFAULT_ZONE_RADIUS_KM = 0.15
DEFAULT_SIMILARITY_THRESHOLD = 0.8
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0
DEFAULT_RECOGNITION_LIMIT = 5
DEFAULT_DEPARTMENT = "Unknown"

WORK_DATE_FORMAT = "%Y-%m-%d"
CLOCK_TIME_FORMAT = "%H:%M"
