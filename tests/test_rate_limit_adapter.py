"""Unit tests for the key-value fixed-window rate limiter."""

import pytest

from content_api.adapters.rate_limit.kv_window import KeyValueFixedWindowRateLimiter


@pytest.mark.asyncio
async def test_allows_up_to_limit_in_same_window(kv_store) -> None:
    limiter = KeyValueFixedWindowRateLimiter(kv_store, limit=3, window_seconds=60)

    first = await limiter.consume("1.2.3.4")
    assert first.allowed is True
    assert first.count == 1
    assert first.remaining == 2

    assert (await limiter.consume("1.2.3.4")).allowed is True
    result = await limiter.consume("1.2.3.4")
    assert result.allowed is True
    assert result.count == 3
    assert result.remaining == 0


@pytest.mark.asyncio
async def test_blocks_request_after_limit(kv_store) -> None:
    limiter = KeyValueFixedWindowRateLimiter(kv_store, limit=2, window_seconds=60)

    assert (await limiter.consume("k")).allowed is True
    assert (await limiter.consume("k")).allowed is True

    blocked = await limiter.consume("k")
    assert blocked.allowed is False
    assert blocked.remaining == 0
    assert blocked.count == 2
    assert blocked.retry_after_seconds == 60


@pytest.mark.asyncio
async def test_blocked_request_does_not_increment(kv_store) -> None:
    limiter = KeyValueFixedWindowRateLimiter(kv_store, limit=1, window_seconds=60)

    await limiter.consume("k")
    await limiter.consume("k")
    await limiter.consume("k")

    assert await kv_store.get("rate_limit:k") == "1"
    assert len(kv_store.set_calls) == 1


@pytest.mark.asyncio
async def test_resets_after_window_expires(kv_store) -> None:
    limiter = KeyValueFixedWindowRateLimiter(kv_store, limit=1, window_seconds=10)

    assert (await limiter.consume("k")).allowed is True
    assert (await limiter.consume("k")).allowed is False

    kv_store.advance(10)
    result = await limiter.consume("k")
    assert result.allowed is True
    assert result.count == 1


@pytest.mark.asyncio
async def test_every_increment_refreshes_expiry(kv_store) -> None:
    limiter = KeyValueFixedWindowRateLimiter(kv_store, limit=5, window_seconds=3600)

    await limiter.consume("k")
    kv_store.advance(3000)
    await limiter.consume("k")

    assert [call[2] for call in kv_store.set_calls] == [3600, 3600]
    assert await kv_store.ttl("rate_limit:k") == 3600


@pytest.mark.asyncio
async def test_isolated_by_identifier(kv_store) -> None:
    limiter = KeyValueFixedWindowRateLimiter(kv_store, limit=1, window_seconds=60)

    assert (await limiter.consume("k1")).allowed is True
    assert (await limiter.consume("k1")).allowed is False

    assert (await limiter.consume("k2")).allowed is True


@pytest.mark.asyncio
async def test_uses_namespaced_key(kv_store) -> None:
    limiter = KeyValueFixedWindowRateLimiter(kv_store, limit=1, window_seconds=60, key_prefix="rl")

    await limiter.consume("10.0.0.1")

    assert "rl:10.0.0.1" in kv_store.data


@pytest.mark.asyncio
async def test_unreadable_counter_starts_new_window(kv_store) -> None:
    limiter = KeyValueFixedWindowRateLimiter(kv_store, limit=2, window_seconds=60)
    await kv_store.set("rate_limit:k", "garbage", ex=60)

    result = await limiter.consume("k")

    assert result.allowed is True
    assert result.count == 1


@pytest.mark.asyncio
async def test_accepts_bytes_counters(kv_store) -> None:
    limiter = KeyValueFixedWindowRateLimiter(kv_store, limit=2, window_seconds=60)
    await kv_store.set("rate_limit:k", b"2", ex=60)

    assert (await limiter.consume("k")).allowed is False


@pytest.mark.parametrize(
    "kwargs",
    [
        {"limit": 0, "window_seconds": 60},
        {"limit": 1, "window_seconds": 0},
    ],
)
def test_invalid_constructor_args(kv_store, kwargs: dict) -> None:
    with pytest.raises(ValueError):
        KeyValueFixedWindowRateLimiter(kv_store, **kwargs)


@pytest.mark.asyncio
async def test_invalid_identifier(kv_store) -> None:
    limiter = KeyValueFixedWindowRateLimiter(kv_store, limit=1, window_seconds=60)

    with pytest.raises(ValueError):
        await limiter.consume("")
