"""Shared test fixtures for pytest.

We set minimal env defaults early so importing modules that instantiate
settings (core.config, dependencies.db) succeeds without needing an
external .env file during tests.
"""

import os
import tempfile
from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient


os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="nyayasetu-uploads-"))

from core.config import get_settings
from core.ratelimit import get_free_trial_ratelimiter, get_ratelimiter
from dependencies.db import get_db
from main import app
from services.documents.storage import ensure_upload_dirs


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """
    Create a test client for the FastAPI application.
    """
    with TestClient(app) as client:
        yield client


class _FakeResult:
    """Lightweight stand-in for a SQLAlchemy result."""

    def scalars(self):
        return self

    def first(self):  # pragma: no cover - trivial
        return None

    def all(self):  # pragma: no cover - trivial
        return []


class _FakeSession:
    """Minimal fake async session used in lightweight tests.

    Only the small surface area required by current tests is implemented.
    Added objects are kept so tests can assert on what would be persisted.
    """

    def __init__(self) -> None:
        self.added: list[object] = []

    def add(self, obj):
        self.added.append(obj)

    async def flush(self):  # pragma: no cover - no-op
        return None

    async def execute(self, _stmt):  # Always empty result
        return _FakeResult()

    async def get(self, _model, _id):  # pragma: no cover - no-op
        return None

    async def delete(self, _obj):  # pragma: no cover - no-op
        return None

    async def refresh(self, _obj):  # pragma: no cover - no-op
        return None

    async def commit(self):  # pragma: no cover - no-op
        return None

    async def rollback(self):  # pragma: no cover - no-op
        return None

    async def close(self):  # pragma: no cover - no-op
        return None


@pytest.fixture
def fake_session() -> _FakeSession:
    return _FakeSession()


@pytest_asyncio.fixture
async def async_client(
    fake_session: _FakeSession,
) -> AsyncGenerator[AsyncClient, None]:
    """Async client with the DB dependency replaced by a fake session."""

    async def _override_get_db() -> AsyncGenerator[_FakeSession, None]:
        try:
            yield fake_session
        finally:  # pragma: no cover - cleanup path
            await fake_session.close()

    # ASGITransport skips the lifespan hook
    ensure_upload_dirs(get_settings())

    # Upstash is never configured in tests; make sure cached limiters agree
    get_ratelimiter.cache_clear()
    get_free_trial_ratelimiter.cache_clear()

    app.dependency_overrides[get_db] = _override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def upload_root() -> str:
    return get_settings().UPLOAD_DIR
