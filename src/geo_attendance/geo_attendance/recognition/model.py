from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FaceMatch:
    subject: str
    similarity: float

    def to_dict(self) -> dict:
        return {"subjectName": self.subject, "similarity": self.similarity}
