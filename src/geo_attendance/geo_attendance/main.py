from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .recognition.controller import register as register_recognition

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    # Base64 photos are posted as JSON.
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_CONTENT_LENGTH", 10 * 1024 * 1024))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s", settings_module)

    if container is None:
        container = build_container(
            sheets_config=getattr(settings, "SHEETS_CONFIG"),
            compreface_config=getattr(settings, "COMPREFACE_CONFIG"),
            timezone_name=getattr(settings, "TIMEZONE", "UTC"),
            similarity_threshold=float(getattr(settings, "SIMILARITY_THRESHOLD")),
            timeout_seconds=float(getattr(settings, "REQUEST_TIMEOUT_SECONDS")),
            zone_cache_seconds=getattr(settings, "ZONE_CACHE_SECONDS", None),
        )

    register_recognition(app, container)
    register_attendance(app, container)

    @app.route("/api/health", methods=["GET"], endpoint="api_health")
    def api_health():
        return jsonify({"status": "ok"})

    return app
