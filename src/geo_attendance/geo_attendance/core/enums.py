from __future__ import annotations

from enum import Enum

from .exceptions import ValidationError


class ClockAction(str, Enum):
    """Hành động chấm công, giá trị khớp với payload của trình duyệt."""

    CLOCK_IN = "clock in"
    CLOCK_OUT = "clock out"

    @classmethod
    def parse(cls, value: object) -> "ClockAction":
        normalized = " ".join(str(value or "").replace("_", " ").replace("-", " ").split()).lower()
        for action in cls:
            if action.value == normalized:
                return action
        raise ValidationError(f"Invalid action: {value!r}")


class AttendanceState(str, Enum):
    """Trạng thái trong ngày của một subject."""

    NO_RECORD = "NO_RECORD"
    CLOCKED_IN = "CLOCKED_IN"
    CLOCKED_OUT = "CLOCKED_OUT"
