"""Global exception handlers for consistent error responses.

Every failure a handler raises ends up as HTTP 500 with a JSON body of the
shape ``{"error": "<message>"}``. There are no structured error codes on the
wire; the code carried by ``AppError`` is only logged.

Design:
- AppError subclasses → 500 with the error message (plus any details)
- Malformed request bodies → 500 with a short message
- Unknown path or method → 404 plain text "Not Found"
- Unexpected Exception → 500 with the exception message (safety net)
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from content_api.core.errors import AppError, LLMAppError, RateLimitAppError
from content_api.core.logging import get_request_id
from content_api.core.middleware import apply_cors_headers

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle domain application errors.

    Args:
        request: FastAPI request object.
        exc: AppError instance (or subclass).

    Returns:
        JSONResponse with status 500 and ``error`` set to the message.
    """
    log = logger.error if isinstance(exc, LLMAppError) else logger.warning
    log(
        "app_error_handled",
        extra={
            "error_code": exc.code,
            "error_message": exc.message,
            "error_type": type(exc).__name__,
            "request_path": request.url.path,
            "rate_limited": isinstance(exc, RateLimitAppError),
            "request_id": get_request_id(),
        },
    )

    content: dict = {"error": exc.message}
    if exc.details:
        content.update(exc.details)

    return JSONResponse(status_code=500, content=content)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle bodies that are not JSON or do not match the request schema."""
    logger.warning(
        "request_validation_failed",
        extra={
            "request_path": request.url.path,
            "error_count": len(exc.errors()),
            "request_id": get_request_id(),
        },
    )
    return JSONResponse(status_code=500, content={"error": "Invalid request body"})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Collapse unmatched routes and unsupported methods into a plain 404."""
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback handler for unexpected errors (safety net).

    This handler runs outside the middleware stack, so CORS headers are set
    here directly. Only the exception message is returned, never a traceback.

    Args:
        request: FastAPI request object.
        exc: Exception instance (unexpected).

    Returns:
        JSONResponse with status 500.
    """
    logger.error(
        "unhandled_exception",
        extra={
            "error_type": type(exc).__name__,
            "error_msg": str(exc),
            "request_path": request.url.path,
            "request_method": request.method,
            "request_id": get_request_id(),
        },
    )

    response = JSONResponse(
        status_code=500,
        content={"error": str(exc) or "Internal Server Error"},
    )
    return apply_cors_headers(response)


def setup_exception_handlers(app) -> None:
    """Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance.
    """
    app.exception_handler(AppError)(app_error_handler)
    app.exception_handler(RequestValidationError)(request_validation_handler)
    app.exception_handler(StarletteHTTPException)(http_exception_handler)
    app.exception_handler(Exception)(general_exception_handler)
