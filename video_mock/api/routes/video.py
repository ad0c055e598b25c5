from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from video_mock.services.dispatcher import DispatchOutcome, VideoDispatcher

router = APIRouter(tags=["Video"])


def get_dispatcher(request: Request) -> VideoDispatcher:
    """Return the dispatcher owned by the running application."""

    return request.app.state.dispatcher


def raw_video_segment(request: Request, video_id: str) -> str:
    """Return the id segment exactly as sent, before percent-decoding.

    ``/video/%35`` must not be served as video 5, so the id is taken from
    the raw request path when the server provides one.
    """

    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return video_id
    path = raw_path.split(b"?", 1)[0].decode("latin-1")
    return path.rsplit("/", 1)[-1]


def first_force_error(request: Request) -> str | None:
    """Return the first ``forceError`` value; later repeats are ignored."""

    values = request.query_params.getlist("forceError")
    return values[0] if values else None


def to_response(outcome: DispatchOutcome) -> Response:
    """Render a dispatcher outcome as a Starlette response."""

    if outcome.body is None:
        return Response(status_code=outcome.status_code, headers=outcome.headers)
    return JSONResponse(
        status_code=outcome.status_code,
        content=outcome.body,
        headers=outcome.headers,
    )


@router.get("/video/{video_id}")
def get_video(
    video_id: str,
    request: Request,
    dispatcher: VideoDispatcher = Depends(get_dispatcher),
) -> Response:
    """Simulated flaky video endpoint.

    The first two requests for a video answer 202 with ``Retry-After: 40``;
    from the third request on the endpoint redirects to the video file.
    ``forceError=429`` or ``forceError=404`` returns that failure without
    counting the attempt.
    """

    outcome = dispatcher.dispatch(
        raw_video_segment(request, video_id),
        first_force_error(request),
    )
    return to_response(outcome)
