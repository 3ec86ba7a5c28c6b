"""Pytest configuration and fixtures shared across all test modules.

Environment variables are set before any import of ``content_api`` so the
settings object is built for the test run: no real provider, an in-memory
database and no Redis.
"""

import os

# CRITICAL: Set this before any imports that might load settings
os.environ["APP_ENV"] = "testing"
os.environ.setdefault("LLM_PROVIDER", "openai")
os.environ.setdefault("LLM_API_KEY", "test-key-123")
os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("KV_REDIS_URL", "")
os.environ.setdefault("APP_RATE_LIMIT_REQUESTS", "10")
os.environ.setdefault("APP_RATE_LIMIT_WINDOW_SECONDS", "3600")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from content_api.adapters.llm.base import AbstractLLMClient
from content_api.adapters.storage.database import (
    create_database_engine,
    create_schema,
    create_session_factory,
)
from content_api.adapters.storage.repository import SummaryRepository
from content_api.core.app_factory import create_app


class FakeKeyValueStore:
    """Redis-like async store with expiring keys driven by a fake clock."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self.now = 1_000.0
        self._clock = clock or (lambda: self.now)
        self.data: dict[str, tuple[Any, float | None]] = {}
        self.set_calls: list[tuple[str, Any, int | None]] = []

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def _live(self, name: str) -> tuple[Any, float | None] | None:
        entry = self.data.get(name)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and expires_at <= self._clock():
            del self.data[name]
            return None
        return entry

    async def get(self, name: str) -> Any:
        entry = self._live(name)
        return entry[0] if entry else None

    async def set(self, name: str, value: Any, ex: int | None = None) -> bool:
        self.set_calls.append((name, value, ex))
        expires_at = self._clock() + ex if ex else None
        self.data[name] = (value, expires_at)
        return True

    async def ttl(self, name: str) -> int:
        entry = self._live(name)
        if entry is None:
            return -2
        if entry[1] is None:
            return -1
        return int(entry[1] - self._clock())


@pytest.fixture
def kv_store() -> FakeKeyValueStore:
    return FakeKeyValueStore()


@pytest.fixture
def fake_llm() -> MagicMock:
    """Inference client double returning fixed provider payloads."""
    llm = MagicMock(spec=AbstractLLMClient)
    llm.name = "stub"
    llm.summarize = AsyncMock(return_value={"summary": "A short summary."})
    llm.chat = AsyncMock(return_value="Some generated content.")
    llm.aclose = AsyncMock()
    return llm


@pytest.fixture
def db_engine():
    return create_database_engine("sqlite+aiosqlite:///:memory:")


@pytest_asyncio.fixture
async def repository(db_engine) -> SummaryRepository:
    await create_schema(db_engine)
    yield SummaryRepository(create_session_factory(db_engine))
    await db_engine.dispose()


@pytest.fixture
def app(fake_llm, kv_store, db_engine):
    return create_app(llm_client=fake_llm, kv_client=kv_store, db_engine=db_engine)


@pytest.fixture
def client(app):
    """Test client with the lifespan running (services wired on app.state)."""
    with TestClient(app) as test_client:
        yield test_client
