"""Factory functions for the rate limit store and limiter."""

import redis.asyncio as redis_lib

from content_api.adapters.rate_limit.base import AbstractRateLimiter
from content_api.adapters.rate_limit.kv_window import KeyValueFixedWindowRateLimiter, KeyValueStore
from content_api.core.config import settings


def create_kv_client() -> redis_lib.Redis | None:
    """Build the Redis client holding rate limit counters.

    Returns:
        A lazily-connecting async Redis client, or None when KV_REDIS_URL is unset.
    """
    if not settings.kv.redis_url:
        return None
    return redis_lib.from_url(settings.kv.redis_url, decode_responses=True)


def create_rate_limiter(store: KeyValueStore) -> AbstractRateLimiter:
    """Build the fixed-window limiter from application settings."""
    return KeyValueFixedWindowRateLimiter(
        store,
        limit=settings.app.rate_limit_requests,
        window_seconds=settings.app.rate_limit_window_seconds,
        key_prefix=settings.kv.key_prefix,
    )
