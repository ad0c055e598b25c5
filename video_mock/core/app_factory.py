"""Application factory for the FastAPI app.

Centralizes app construction (state, middleware, handlers, routers) so tests
can build an isolated instance with its own attempt counter.
"""

from __future__ import annotations

from fastapi import FastAPI

from video_mock.adapters.attempts.base import AbstractAttemptCounter
from video_mock.api.routes import video_router
from video_mock.core.exception_handlers import setup_exception_handlers
from video_mock.core.middleware import cors_middleware, request_id_middleware
from video_mock.services.dispatcher import VideoDispatcher


def create_app(counter: AbstractAttemptCounter | None = None) -> FastAPI:
    """Create and configure the FastAPI application instance.

    Args:
        counter: Attempt counter to use; a fresh in-memory one when omitted.

    Returns:
        Configured FastAPI app with middleware, handlers and routers.
    """

    # Only /video/{id} is served: no docs pages, no trailing-slash redirects
    app = FastAPI(
        title="Flaky Video Mock",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.dispatcher = VideoDispatcher(counter=counter)

    # Middleware (last registered runs first)
    app.middleware("http")(request_id_middleware)
    app.middleware("http")(cors_middleware)

    setup_exception_handlers(app)

    app.include_router(video_router)

    return app
