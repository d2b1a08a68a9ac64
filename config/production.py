from .config import *  # noqa: F401,F403
from .config import _optional_float

DEBUG = False

# Zones rarely change; revalidate every 5 minutes unless told otherwise.
ZONE_CACHE_SECONDS = _optional_float("ZONE_CACHE_SECONDS")
if ZONE_CACHE_SECONDS is None:
    ZONE_CACHE_SECONDS = 300.0
