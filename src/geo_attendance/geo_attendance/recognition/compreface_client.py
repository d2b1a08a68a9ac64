from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_RECOGNITION_LIMIT, DEFAULT_REQUEST_TIMEOUT_SECONDS
from ..core.exceptions import DownstreamFailure
from .model import FaceMatch

logger = logging.getLogger(__name__)

RECOGNIZE_PATH = "/api/v1/recognition/recognize"


class CompreFaceClient:
    """Thin client for the CompreFace recognition service."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        limit: int = DEFAULT_RECOGNITION_LIMIT,
        session: Optional[requests.Session] = None,
    ):
        self._url = base_url.rstrip("/") + RECOGNIZE_PATH
        self._api_key = api_key
        self._timeout = float(timeout_seconds)
        self._limit = int(limit)
        self._session = session or requests.Session()

    def recognize(self, image_b64: str) -> dict[str, Any]:
        """POST a base64 image and return CompreFace's JSON response as-is.

        Client errors that carry a JSON body (e.g. "No face is found in the
        given image") are returned, not raised; the caller decides.
        """
        try:
            resp = self._session.post(
                self._url,
                params={"limit": self._limit},
                headers={"x-api-key": self._api_key, "Content-Type": "application/json"},
                json={"file": image_b64},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error("CompreFace request failed: %s", e)
            raise DownstreamFailure(f"Face recognition service unreachable: {e}") from e

        if resp.status_code >= 500:
            logger.error("CompreFace returned %d: %s", resp.status_code, resp.text[:200])
            raise DownstreamFailure(f"Face recognition service error ({resp.status_code})")

        try:
            return resp.json()
        except ValueError as e:
            raise DownstreamFailure("Face recognition service returned invalid JSON") from e


def best_match(response: dict[str, Any]) -> Optional[FaceMatch]:
    """First subject of the first detected face, if any."""
    faces = response.get("result") or []
    if not faces:
        return None
    subjects = faces[0].get("subjects") or []
    if not subjects:
        return None
    top = subjects[0]
    try:
        return FaceMatch(subject=str(top["subject"]), similarity=float(top["similarity"]))
    except (KeyError, TypeError, ValueError):
        logger.warning("Unexpected CompreFace subject payload: %r", top)
        return None
