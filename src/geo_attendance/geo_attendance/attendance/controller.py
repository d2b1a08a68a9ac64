from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_timestamp
from ..common.validators import first_present, require_float, require_non_empty
from ..container import Container
from ..core.enums import ClockAction
from ..core.exceptions import AuthorizationDenied, DownstreamFailure, ValidationError
from .model import ClockRequest

logger = logging.getLogger(__name__)


def parse_clock_request(data: dict, *, container: Container) -> ClockRequest:
    action = ClockAction.parse(require_non_empty(data.get("action"), "action"))
    subject = require_non_empty(first_present(data, "subjectId", "subjectName"), "subjectId/subjectName")
    latitude = require_float(data.get("latitude"), "latitude")
    longitude = require_float(data.get("longitude"), "longitude")

    raw_ts = data.get("timestamp")
    if raw_ts is None or not str(raw_ts).strip():
        timestamp = now_local(container.tz)
    else:
        timestamp = parse_iso_timestamp(str(raw_ts), tz=container.tz)

    return ClockRequest(
        action=action,
        subject_identifier=subject,
        latitude=latitude,
        longitude=longitude,
        timestamp=timestamp,
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/web", methods=["POST"], endpoint="api_attendance_web")
    def api_attendance_web():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"success": False, "message": "Invalid input. Please try again!"}), 400

        try:
            clock_request = parse_clock_request(data, container=container)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        try:
            result = container.attendance_service.clock(clock_request)
            return jsonify(result.to_dict()), 200
        except AuthorizationDenied as e:
            return jsonify({"success": False, "message": str(e)}), 403
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except DownstreamFailure as e:
            logger.exception("Attendance error")
            return jsonify({"success": False, "message": f"Server error: {e}"}), 500
