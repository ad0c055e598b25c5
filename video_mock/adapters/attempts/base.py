"""Attempt counter interface.

Callers depend on this abstraction rather than the in-memory implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class AbstractAttemptCounter(ABC):
    """Interface for per-video attempt counters."""

    @abstractmethod
    def increment(self, video_id: int) -> int:
        """Atomically record one qualifying request for a video.

        Args:
            video_id: Endpoint identifier.

        Returns:
            The new attempt count (1 on the first request).
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, video_id: int) -> int:
        """Return the current count for a video without changing it.

        Args:
            video_id: Endpoint identifier.

        Returns:
            Number of qualifying requests seen so far (0 if never requested).
        """
        raise NotImplementedError

    @abstractmethod
    def snapshot(self) -> dict[int, int]:
        """Return a copy of the whole counter table."""
        raise NotImplementedError
