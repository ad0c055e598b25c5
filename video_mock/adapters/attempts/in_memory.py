"""In-memory attempt counter.

Notes:
- Per-process only: counts are lost on restart and not shared across workers.
- Thread-safe: sync routes run in a thread pool, so a lock guards the table.
"""

from __future__ import annotations

import threading

from video_mock.adapters.attempts.base import AbstractAttemptCounter


class InMemoryAttemptCounter(AbstractAttemptCounter):
    """Attempt counter backed by a lock-guarded dict keyed by video id.

    Entries are created on first increment and never removed. A fresh
    instance starts with an empty table.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counts: dict[int, int] = {}

    def __repr__(self) -> str:  # pragma: no cover - representation only
        return f"InMemoryAttemptCounter(tracked={len(self._counts)})"

    @staticmethod
    def _check_id(video_id: int) -> None:
        if video_id < 0:
            raise ValueError("video_id must be >= 0")

    def increment(self, video_id: int) -> int:
        """Add one to the count for ``video_id`` and return the new value.

        Raises:
            ValueError: If video_id is negative.
        """
        self._check_id(video_id)
        with self._lock:
            count = self._counts.get(video_id, 0) + 1
            self._counts[video_id] = count
            return count

    def get(self, video_id: int) -> int:
        self._check_id(video_id)
        with self._lock:
            return self._counts.get(video_id, 0)

    def snapshot(self) -> dict[int, int]:
        with self._lock:
            return dict(self._counts)
