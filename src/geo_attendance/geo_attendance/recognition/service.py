from __future__ import annotations

import logging
from typing import Any, Protocol

from ..core.constants import DEFAULT_SIMILARITY_THRESHOLD
from ..core.exceptions import LowConfidenceMatch, ValidationError
from .compreface_client import best_match
from .model import FaceMatch

logger = logging.getLogger(__name__)


class FaceRecognizer(Protocol):
    def recognize(self, image_b64: str) -> dict[str, Any]:
        raise NotImplementedError


def strip_data_url(image: str) -> str:
    """Accept both raw base64 and ``data:image/jpeg;base64,...`` strings."""
    if image.startswith("data:") and "," in image:
        return image.split(",", 1)[1]
    return image


class RecognitionService:
    def __init__(self, recognizer: FaceRecognizer, *, threshold: float = DEFAULT_SIMILARITY_THRESHOLD):
        if not 0.0 <= threshold <= 1.0:
            raise ValidationError("Similarity threshold must be between 0 and 1")
        self._recognizer = recognizer
        self._threshold = float(threshold)

    @property
    def threshold(self) -> float:
        return self._threshold

    def proxy(self, image_b64: str) -> dict[str, Any]:
        return self._recognizer.recognize(strip_data_url(image_b64))

    def identify(self, image_b64: str) -> FaceMatch:
        match = best_match(self.proxy(image_b64))
        if match is None:
            raise LowConfidenceMatch("No matching face found.")
        if match.similarity < self._threshold:
            logger.info("Low similarity %.3f for %s (threshold %.2f)", match.similarity, match.subject, self._threshold)
            raise LowConfidenceMatch("Face not recognized or too low similarity.")
        return match
