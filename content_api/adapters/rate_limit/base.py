"""Rate limiter interfaces.

The API depends on this abstraction rather than a concrete store so the
backing key-value service can be swapped without touching the routes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimitResult:
    """Result of a rate limit consume operation.

    Attributes:
        allowed: Whether the request is allowed to proceed.
        limit: Max requests per window.
        count: Counter value after this request (unchanged when blocked).
        remaining: Remaining requests in the current window (0 when blocked).
        retry_after_seconds: Seconds until the counter expires, when blocked.
    """

    allowed: bool
    limit: int
    count: int
    remaining: int
    retry_after_seconds: int | None


class AbstractRateLimiter(ABC):
    """Interface for rate limiters."""

    @abstractmethod
    async def consume(self, identifier: str) -> RateLimitResult:
        """Consume one unit of budget for a client identifier.

        Args:
            identifier: Client identifier (e.g., IP address).

        Returns:
            RateLimitResult describing whether it was allowed.
        """
        raise NotImplementedError
