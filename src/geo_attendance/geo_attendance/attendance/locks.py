from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List

from ..core.exceptions import DownstreamFailure


class SubjectLocks:
    """Per-subject mutex registry.

    Serializes the ledger read-modify-write for one subject within this
    process. Separate worker processes or hosts are not coordinated, so two
    of them can still both append a clock-in for the same subject.

    Note: An entry lives only while some request holds or waits on it, so the
    registry stays as small as the number of subjects in flight.
    """

    def __init__(self, *, timeout_seconds: float):
        self._timeout = float(timeout_seconds)
        self._guard = threading.Lock()
        # subject key -> [lock, number of holders and waiters]
        self._locks: Dict[str, List] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    def _checkout(self, subject_key: str) -> threading.Lock:
        with self._guard:
            entry = self._locks.get(subject_key)
            if entry is None:
                entry = [threading.Lock(), 0]
                self._locks[subject_key] = entry
            entry[1] += 1
            return entry[0]

    def _checkin(self, subject_key: str) -> None:
        with self._guard:
            entry = self._locks[subject_key]
            entry[1] -= 1
            if entry[1] == 0:
                del self._locks[subject_key]

    @contextmanager
    def hold(self, subject_key: str) -> Iterator[None]:
        lock = self._checkout(subject_key)
        try:
            if not lock.acquire(timeout=self._timeout):
                raise DownstreamFailure(f"Another request for {subject_key} is still in progress")
            try:
                yield
            finally:
                lock.release()
        finally:
            self._checkin(subject_key)
