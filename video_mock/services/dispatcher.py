"""Request dispatcher simulating a flaky video-delivery upstream.

Each video endpoint answers "retry later" (202) to its first two qualifying
requests and redirects (307) to a real video file from the third request on.
The ``forceError`` query parameter short-circuits this flow with a simulated
429 or 404 and leaves the attempt count untouched.

The dispatcher never raises for bad input: every request maps to one of the
outcomes below.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Sequence

from video_mock.adapters.attempts.base import AbstractAttemptCounter
from video_mock.adapters.attempts.in_memory import InMemoryAttemptCounter
from video_mock.schemas.video import (
    EndpointErrorResponse,
    RetryLaterResponse,
    StatusMessageResponse,
)

logger = logging.getLogger(__name__)

VIDEO_URLS: tuple[str, ...] = (
    "https://www.pexels.com/download/video/17169505/",
    "https://www.pexels.com/download/video/27831511/",
    "https://www.pexels.com/download/video/15283135/",
    "https://www.pexels.com/download/video/15283202/",
    "https://www.pexels.com/download/video/15283199/",
    "https://www.pexels.com/download/video/15283174/",
    "https://www.pexels.com/download/video/15612910/",
    "https://www.pexels.com/download/video/20422317/",
    "https://www.pexels.com/download/video/14993748/",
)

# 0..100, no sign, no leading zeros
_VIDEO_ID_PATTERN = re.compile(r"0|[1-9][0-9]?|100")

# Attempts answered with 202 before the redirect is served
RETRY_LATER_ATTEMPTS = 2
RETRY_LATER_SECONDS = 40
TOO_MANY_REQUESTS_RETRY_SECONDS = 5


@dataclass(frozen=True)
class DispatchOutcome:
    """Response selected for a request.

    Attributes:
        status_code: HTTP status to send.
        headers: Outcome-specific headers (CORS is added by middleware).
        body: JSON body, or None for an empty body.
    """

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] | None = None


def parse_video_id(raw: str) -> int | None:
    """Return the numeric id for a ``/video/{id}`` path segment, or None.

    Examples:
        >>> parse_video_id("7")
        7
        >>> parse_video_id("007") is None
        True
        >>> parse_video_id("101") is None
        True
    """
    if not _VIDEO_ID_PATTERN.fullmatch(raw):
        return None
    return int(raw)


def invalid_endpoint_outcome() -> DispatchOutcome:
    return DispatchOutcome(
        status_code=404,
        body=EndpointErrorResponse.invalid_endpoint().model_dump(),
    )


class VideoDispatcher:
    """Select the response for ``GET /video/{id}`` and track attempts.

    The dispatcher owns its attempt counter, so separate instances (e.g. one
    per test) never share state.
    """

    def __init__(
        self,
        counter: AbstractAttemptCounter | None = None,
        video_urls: Sequence[str] = VIDEO_URLS,
    ) -> None:
        if not video_urls:
            raise ValueError("video_urls must not be empty")
        self.counter = counter or InMemoryAttemptCounter()
        self._video_urls = tuple(video_urls)

    def select_url(self, video_id: int) -> str:
        """Return the redirect target for a video id."""
        return self._video_urls[video_id % len(self._video_urls)]

    def dispatch(self, raw_video_id: str, force_error: str | None = None) -> DispatchOutcome:
        """Produce the outcome for one request.

        Args:
            raw_video_id: Path segment following ``/video/``.
            force_error: Value of the ``forceError`` query parameter, if any.

        Returns:
            DispatchOutcome describing status, headers and body.
        """
        video_id = parse_video_id(raw_video_id)
        if video_id is None:
            logger.warning(
                "video.invalid_endpoint",
                extra={"path": f"/video/{raw_video_id}"},
            )
            return invalid_endpoint_outcome()

        endpoint = f"video-{video_id}"

        if force_error == "429":
            logger.info(
                "video.forced_error",
                extra={"endpoint": endpoint, "video_id": video_id, "forced_status": 429},
            )
            return DispatchOutcome(
                status_code=429,
                headers={"Retry-After": str(TOO_MANY_REQUESTS_RETRY_SECONDS)},
                body=StatusMessageResponse(
                    status=429, message="Too many requests. Try later"
                ).model_dump(),
            )

        if force_error == "404":
            logger.info(
                "video.forced_error",
                extra={"endpoint": endpoint, "video_id": video_id, "forced_status": 404},
            )
            return DispatchOutcome(
                status_code=404,
                body=StatusMessageResponse(status=404, message="Not found").model_dump(),
            )

        attempt = self.counter.increment(video_id)
        video_url = self.select_url(video_id)

        if attempt <= RETRY_LATER_ATTEMPTS:
            logger.info(
                "video.retry_later",
                extra={
                    "endpoint": endpoint,
                    "video_id": video_id,
                    "video_url": video_url,
                    "attempt": attempt,
                },
            )
            return DispatchOutcome(
                status_code=202,
                headers={
                    "Retry-After": str(RETRY_LATER_SECONDS),
                    "delayed-fetch": "no-check",
                },
                body=RetryLaterResponse(attempt=attempt, videoId=raw_video_id).model_dump(),
            )

        logger.info(
            "video.redirect",
            extra={
                "endpoint": endpoint,
                "video_id": video_id,
                "video_url": video_url,
                "attempt": attempt,
            },
        )
        return DispatchOutcome(status_code=307, headers={"Location": video_url})
