"""Global exception handlers for consistent error responses.

The mock's simulated failures are ordinary responses chosen by the
dispatcher; these handlers only cover what the framework raises (unknown
routes, unsupported methods) and unexpected faults.

Design:
- 404 from routing → the same "Invalid endpoint" body the dispatcher uses
- Other HTTP errors (e.g. 405) → JSON ``{"error", "message"}``
- Unexpected Exception → generic 500 (safety net), CORS headers included
"""

import logging
from http import HTTPStatus

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from video_mock.core.logging import get_request_id
from video_mock.core.middleware import CORS_HEADERS
from video_mock.schemas.video import EndpointErrorResponse

logger = logging.getLogger(__name__)


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors in the mock's JSON envelope.

    Args:
        request: FastAPI request object.
        exc: HTTPException raised by routing or a route.

    Returns:
        JSONResponse with the exception's status code and headers.
    """
    if exc.status_code == 404:
        logger.warning(
            "video.invalid_endpoint",
            extra={"path": request.url.path, "request_method": request.method},
        )
        return JSONResponse(
            status_code=404,
            content=EndpointErrorResponse.invalid_endpoint().model_dump(),
        )

    logger.warning(
        "http.error",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "request_method": request.method,
        },
    )
    body = EndpointErrorResponse(
        error=_reason_phrase(exc.status_code),
        message=str(exc.detail),
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback handler for unexpected errors (safety net).

    Runs outside the middleware stack, so CORS headers are attached here.
    No implementation details are leaked to the client.

    Args:
        request: FastAPI request object.
        exc: Exception instance (unexpected).

    Returns:
        JSONResponse with a generic 500 body.
    """
    logger.error(
        "unhandled_exception",
        extra={
            "error_type": type(exc).__name__,
            "error_msg": str(exc),
            "path": request.url.path,
            "request_method": request.method,
            "request_id": get_request_id(),
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": "An unexpected error occurred. Please try again later.",
        },
        headers=CORS_HEADERS,
    )


def setup_exception_handlers(app) -> None:
    """Register all exception handlers with the FastAPI app.

    Example:
        >>> from fastapi import FastAPI
        >>> from video_mock.core.exception_handlers import setup_exception_handlers
        >>> app = FastAPI()
        >>> setup_exception_handlers(app)
    """
    app.exception_handler(StarletteHTTPException)(http_exception_handler)
    app.exception_handler(Exception)(general_exception_handler)
