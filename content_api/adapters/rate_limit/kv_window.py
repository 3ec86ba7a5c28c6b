"""Fixed-window rate limiter backed by an expiring key-value entry.

Each client gets one counter key. The first request in a window creates it,
every allowed request rewrites it with ``count + 1`` and a fresh TTL, and the
store drops it once the TTL runs out, which opens the next window.

Notes:
- The read and the write are separate round trips. Two requests from the same
  client landing at the same instant can both pass the check; that race is
  accepted for this limiter.
- Any async client exposing redis-style ``get``, ``set(..., ex=...)`` and
  ``ttl`` works (``redis.asyncio.Redis`` in production).
"""

from __future__ import annotations

from typing import Any, Protocol

from content_api.adapters.rate_limit.base import AbstractRateLimiter, RateLimitResult


class KeyValueStore(Protocol):
    async def get(self, name: str) -> Any: ...

    async def set(self, name: str, value: Any, ex: int | None = None) -> Any: ...

    async def ttl(self, name: str) -> int: ...


def _parse_count(raw: Any) -> int:
    if raw is None:
        return 0
    if isinstance(raw, bytes):
        raw = raw.decode()
    try:
        return int(raw)
    except (TypeError, ValueError):
        # A corrupted counter restarts the window instead of failing requests
        return 0


class KeyValueFixedWindowRateLimiter(AbstractRateLimiter):
    """Rate limiter storing one expiring counter per client identifier."""

    def __init__(
        self,
        store: KeyValueStore,
        *,
        limit: int = 10,
        window_seconds: int = 3600,
        key_prefix: str = "rate_limit",
    ) -> None:
        """Initialize the limiter.

        Args:
            store: Async key-value client holding the counters.
            limit: Maximum number of allowed requests per window.
            window_seconds: Counter lifetime in seconds.
            key_prefix: Namespace prepended to each identifier.

        Raises:
            ValueError: If limit or window_seconds are invalid.
        """
        if limit < 1:
            raise ValueError("limit must be >= 1")
        if window_seconds < 1:
            raise ValueError("window_seconds must be >= 1")

        self._store = store
        self._limit = limit
        self._window_seconds = window_seconds
        self._key_prefix = key_prefix

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def window_seconds(self) -> int:
        return self._window_seconds

    def build_key(self, identifier: str) -> str:
        return f"{self._key_prefix}:{identifier}"

    async def consume(self, identifier: str) -> RateLimitResult:
        """Check the counter for ``identifier`` and bump it when allowed.

        Raises:
            ValueError: If identifier is empty.
        """
        if not identifier:
            raise ValueError("identifier must be a non-empty string")

        key = self.build_key(identifier)
        count = _parse_count(await self._store.get(key))

        if count >= self._limit:
            ttl = await self._store.ttl(key)
            return RateLimitResult(
                allowed=False,
                limit=self._limit,
                count=count,
                remaining=0,
                retry_after_seconds=ttl if ttl and ttl > 0 else self._window_seconds,
            )

        count += 1
        await self._store.set(key, str(count), ex=self._window_seconds)
        return RateLimitResult(
            allowed=True,
            limit=self._limit,
            count=count,
            remaining=max(0, self._limit - count),
            retry_after_seconds=None,
        )
