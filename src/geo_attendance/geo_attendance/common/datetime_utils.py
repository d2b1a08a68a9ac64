from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.constants import CLOCK_TIME_FORMAT, WORK_DATE_FORMAT
from ..core.exceptions import ValidationError


def get_zone(name: str) -> tzinfo:
    """Resolve an IANA timezone name ("UTC", "Africa/Accra")."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValidationError(f"Unknown timezone: {name!r}") from e


def parse_iso_timestamp(value: str, *, tz: tzinfo) -> datetime:
    """Parse an ISO-8601 timestamp as sent by browsers (``Date.toISOString``).

    Naive timestamps are interpreted in the deployment timezone ``tz``.
    """
    text = (value or "").strip()
    if not text:
        raise ValidationError("timestamp is required")
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise ValidationError(f"Invalid timestamp: {value!r}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


def work_date_of(timestamp: datetime, *, tz: tzinfo) -> str:
    """Calendar day of the request timestamp in the deployment timezone."""
    return to_local(timestamp, tz=tz).strftime(WORK_DATE_FORMAT)


def to_local(timestamp: datetime, *, tz: tzinfo) -> datetime:
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=tz)
    return timestamp.astimezone(tz)


def format_clock_time(timestamp: datetime, *, tz: tzinfo) -> str:
    return to_local(timestamp, tz=tz).strftime(CLOCK_TIME_FORMAT)


def format_timestamp(timestamp: datetime) -> str:
    """Serialize for the ledger; UTC instants keep the browser's ``Z`` suffix."""
    offset = timestamp.utcoffset()
    if offset is not None and not offset:
        return timestamp.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return timestamp.isoformat()


def now_local(tz: tzinfo) -> datetime:
    """Current time in the deployment timezone.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz)
