"""Pytest fixtures for the app template tests."""

import time
import uuid
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from jose import jwt

from tenant_app.app import create_app
from tenant_app.config import settings
from tenant_app.database.session import get_db
from tenant_app.limiter import limiter


@pytest.fixture(autouse=True)
def _disable_rate_limit() -> Generator[None, None, None]:
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Return a factory that signs platform session tokens."""

    def _make(
        tenant_id: uuid.UUID | str | None = None,
        user_id: uuid.UUID | str | None = None,
        tenant_slug: str = "acme",
        role: str = "admin",
        expires_in: int = 3600,
        **extra,
    ) -> str:
        claims = {
            "sub": str(user_id or uuid.uuid4()),
            "tenant_id": str(tenant_id or uuid.uuid4()),
            "tenant_slug": tenant_slug,
            "role": role,
            "exp": int(time.time()) + expires_in,
        }
        claims.update(extra)
        return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

    return _make


@pytest.fixture
def mock_db() -> MagicMock:
    """An AsyncSession stand-in that fills server defaults on flush."""
    session = MagicMock()
    # Result.scalars().all() is synchronous on a real session
    session.execute = AsyncMock(return_value=MagicMock())
    session.commit = AsyncMock()
    session.rollback = AsyncMock()

    async def _flush() -> None:
        now = datetime.now(UTC)
        for call in session.add.call_args_list:
            obj = call.args[0]
            if obj.id is None:
                obj.id = uuid.uuid4()
                obj.created_at = now
                obj.updated_at = now
            if obj.status is None:
                obj.status = "pending"

    session.flush = AsyncMock(side_effect=_flush)
    return session


@pytest.fixture
def app(mock_db: MagicMock) -> Generator[FastAPI, None, None]:
    application = create_app()

    async def _override_get_db():
        yield mock_db

    application.dependency_overrides[get_db] = _override_get_db
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
