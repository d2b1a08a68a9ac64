from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import DownstreamFailure, LowConfidenceMatch

logger = logging.getLogger(__name__)


def _image_from_request() -> Optional[str]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    image = data.get("image") or data.get("file") or data.get("imageBase64")
    if not isinstance(image, str) or not image.strip():
        return None
    return image.strip()


def register(app: Flask, container: Container) -> None:
    @app.route("/api/proxy/face-recognition", methods=["POST"], endpoint="api_face_proxy")
    def api_face_proxy():
        """Forward the photo to CompreFace and return its response untouched."""
        image = _image_from_request()
        if image is None:
            return jsonify({"success": False, "message": "No image provided"}), 400

        try:
            return jsonify(container.recognition_service.proxy(image)), 200
        except DownstreamFailure as e:
            logger.exception("Proxy error")
            return jsonify({"error": f"Proxy error: {e}"}), 500

    @app.route("/api/recognize", methods=["POST"], endpoint="api_recognize")
    def api_recognize():
        image = _image_from_request()
        if image is None:
            return jsonify({"success": False, "message": "No image provided"}), 400

        try:
            match = container.recognition_service.identify(image)
        except LowConfidenceMatch as e:
            return jsonify({"success": False, "message": str(e)}), 200
        except DownstreamFailure as e:
            logger.exception("Recognition error")
            return jsonify({"success": False, "message": f"Recognition error: {e}"}), 500

        return jsonify({"success": True, **match.to_dict()}), 200
