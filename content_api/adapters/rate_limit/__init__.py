"""Rate limiting adapters.

Counters live in an external key-value store so every worker process shares
the same budget per client.
"""

from content_api.adapters.rate_limit.base import AbstractRateLimiter, RateLimitResult
from content_api.adapters.rate_limit.kv_window import KeyValueFixedWindowRateLimiter

__all__ = [
    "AbstractRateLimiter",
    "KeyValueFixedWindowRateLimiter",
    "RateLimitResult",
]
