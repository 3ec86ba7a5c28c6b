"""Rate limiting entry point for the HTTP layer.

Rate limiting strategy:
- Fixed-window counter per client, stored in the key-value store.
- Client identity is the address reported by the edge proxy header, falling
  back to the socket peer and finally to ``"unknown"``.
- Exceeding the budget raises ``RateLimitAppError``, which the global handler
  turns into a 500 like every other failure.

Routes call ``enforce_rate_limit`` explicitly after input validation so that
an empty payload never touches the counter store.
"""

from __future__ import annotations

import hashlib
import logging

from fastapi import Request

from content_api.adapters.rate_limit.base import AbstractRateLimiter
from content_api.core.config import settings
from content_api.core.errors import RateLimitAppError

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."


def get_client_identifier(request: Request) -> str:
    """Resolve the identifier the limiter keys on.

    Args:
        request: FastAPI request.

    Returns:
        str: Client address or ``"unknown"``.
    """
    forwarded = request.headers.get(settings.app.client_ip_header)
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def _hash_identifier(identifier: str) -> str:
    """Hash the client identifier for logging without exposing addresses."""
    return hashlib.sha256(identifier.encode()).hexdigest()[:16]


async def enforce_rate_limit(request: Request) -> None:
    """Consume one request from the caller's budget.

    Does nothing when rate limiting is disabled or no limiter is configured.

    Args:
        request: FastAPI request; the limiter is read from ``app.state``.

    Raises:
        RateLimitAppError: When the caller already used up the window.
    """

    if not settings.app.rate_limit_enabled:
        return

    limiter: AbstractRateLimiter | None = getattr(request.app.state, "rate_limiter", None)
    if limiter is None:
        logger.debug("rate_limit.skipped", extra={"reason": "no_limiter"})
        return

    identifier = get_client_identifier(request)
    key_hash = _hash_identifier(identifier)

    result = await limiter.consume(identifier)
    if result.allowed:
        logger.info(
            "rate_limit.allowed",
            extra={
                "key_hash": key_hash,
                "limit": result.limit,
                "remaining": result.remaining,
            },
        )
        return

    logger.warning(
        "rate_limit.exceeded",
        extra={
            "key_hash": key_hash,
            "limit": result.limit,
            "count": result.count,
            "retry_after_s": result.retry_after_seconds,
        },
    )
    raise RateLimitAppError(
        code="rate_limit_exceeded",
        message=RATE_LIMIT_MESSAGE,
    )
