"""HTTP middleware for request correlation and CORS.

Two function middlewares are registered on the app:

- ``request_id_middleware`` accepts an incoming X-Request-ID header or
  generates a UUID, stores it in contextvars for log correlation, and echoes
  it (plus the request duration) in the response headers.
- ``cors_middleware`` answers every OPTIONS request with an empty body and
  stamps the permissive CORS headers on every other response.

Usage:
    app.middleware("http")(cors_middleware)
    app.middleware("http")(request_id_middleware)
"""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request, Response

from content_api.core.config import settings
from content_api.core.logging import clear_request_id, set_request_id

logger = logging.getLogger(__name__)

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def apply_cors_headers(response: Response) -> Response:
    """Set the CORS headers on ``response`` in place and return it."""
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response


async def request_id_middleware(request: Request, call_next) -> Response:
    """Generate or propagate a request id and time the request.

    Args:
        request: The incoming HTTP request object.
        call_next: The next middleware/route handler in the stack.

    Returns:
        Response with X-Request-ID and X-Request-Duration-ms headers added.
    """

    header_name = settings.log.request_id_header
    request_id = request.headers.get(header_name) or str(uuid.uuid4())
    set_request_id(request_id)
    start = time.perf_counter()
    try:
        response: Response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "http.request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
    finally:
        clear_request_id()

    response.headers[header_name] = request_id
    response.headers.setdefault("X-Request-Duration-ms", f"{duration_ms:.2f}")
    return response


async def cors_middleware(request: Request, call_next) -> Response:
    """Short-circuit preflight requests and attach CORS headers.

    Any OPTIONS request is answered directly, whatever the path, with an
    empty 200 body. Browsers send preflights without credentials, so no
    route lookup or rate limiting happens for them.
    """

    if request.method == "OPTIONS":
        return apply_cors_headers(Response(status_code=200))

    response: Response = await call_next(request)
    return apply_cors_headers(response)
