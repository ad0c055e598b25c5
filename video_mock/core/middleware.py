"""HTTP middleware for CORS handling and request ID correlation.

Usage:
    app.middleware("http")(request_id_middleware)
    app.middleware("http")(cors_middleware)

Register ``cors_middleware`` last so it is outermost and answers preflight
requests before anything else runs.
"""

from __future__ import annotations

import time
import uuid

from fastapi import Request, Response

from video_mock.core.config import settings
from video_mock.core.logging import clear_request_id, set_request_id

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


async def cors_middleware(request: Request, call_next) -> Response:
    """Answer preflight requests and stamp CORS headers on every response.

    Any ``OPTIONS`` request, whatever its path, gets an empty 204 carrying
    only the CORS headers. It is not logged and never reaches a route.
    """

    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)

    response: Response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


async def request_id_middleware(request: Request, call_next) -> Response:
    """HTTP middleware for request ID generation and propagation.

    If the client provides the configured request id header (``X-Request-ID``
    by default) that value is used, otherwise a UUID is generated. The id is
    stored in contextvars for log correlation and echoed in the response
    together with the handling duration.

    Args:
        request: The incoming HTTP request object.
        call_next: The next middleware/route handler in the stack.

    Returns:
        Response: The response from the next handler with request_id and
            duration headers added.
    """

    header_name = settings.log.request_id_header
    request_id = request.headers.get(header_name) or str(uuid.uuid4())
    set_request_id(request_id)
    start = time.perf_counter()
    try:
        response: Response = await call_next(request)
    finally:
        clear_request_id()

    duration_ms = (time.perf_counter() - start) * 1000
    response.headers[header_name] = request_id
    response.headers.setdefault("X-Request-Duration-ms", f"{duration_ms:.2f}")
    return response
