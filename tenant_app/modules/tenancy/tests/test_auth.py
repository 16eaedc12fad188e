"""Unit tests for platform token authentication."""

import time
import uuid

import pytest
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt
from starlette.requests import Request

from tenant_app.config import settings
from tenant_app.exceptions import UnauthorizedException
from tenant_app.modules.tenancy.auth import AuthContext, get_auth_context, require_auth


def _token(**overrides) -> str:
    claims = {
        "sub": str(uuid.uuid4()),
        "tenant_id": str(uuid.uuid4()),
        "tenant_slug": "acme",
        "role": "admin",
        "name": "Ada",
        "email": "ada@acme.test",
        "exp": int(time.time()) + 600,
    }
    claims.update(overrides)
    claims = {k: v for k, v in claims.items() if v is not None}
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def _request(cookie: str | None = None) -> Request:
    headers = []
    if cookie is not None:
        headers.append((b"cookie", cookie.encode()))
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


@pytest.mark.asyncio
async def test_require_auth_builds_context_from_claims():
    tenant_id = uuid.uuid4()
    user_id = uuid.uuid4()

    auth = await require_auth(_request(), _bearer(_token(sub=str(user_id), tenant_id=str(tenant_id))))

    assert auth == AuthContext(
        tenant_id=tenant_id,
        tenant_slug="acme",
        user_id=user_id,
        role="admin",
        name="Ada",
        email="ada@acme.test",
    )


@pytest.mark.asyncio
async def test_require_auth_reads_session_cookie():
    tenant_id = uuid.uuid4()
    cookie = f"{settings.session_cookie_name}={_token(tenant_id=str(tenant_id))}"

    auth = await require_auth(_request(cookie=cookie), None)

    assert auth.tenant_id == tenant_id


@pytest.mark.asyncio
async def test_bearer_header_wins_over_cookie():
    header_tenant = uuid.uuid4()
    cookie = f"{settings.session_cookie_name}={_token(tenant_id=str(uuid.uuid4()))}"

    auth = await require_auth(_request(cookie=cookie), _bearer(_token(tenant_id=str(header_tenant))))

    assert auth.tenant_id == header_tenant


@pytest.mark.asyncio
async def test_optional_claims_default():
    auth = await require_auth(_request(), _bearer(_token(role=None, name=None, email=None, tenant_slug=None)))

    assert auth.role == "member"
    assert auth.tenant_slug == ""
    assert auth.name is None
    assert auth.email is None


@pytest.mark.asyncio
async def test_missing_token_raises():
    with pytest.raises(UnauthorizedException, match="Authentication required"):
        await require_auth(_request(), None)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"tenant_id": None},
        {"sub": None},
        {"tenant_id": "not-a-uuid"},
    ],
)
async def test_missing_or_malformed_claims_raise(overrides):
    with pytest.raises(UnauthorizedException, match="missing required claims"):
        await require_auth(_request(), _bearer(_token(**overrides)))


@pytest.mark.asyncio
async def test_expired_token_raises():
    with pytest.raises(UnauthorizedException, match="Invalid or expired"):
        await require_auth(_request(), _bearer(_token(exp=int(time.time()) - 10)))


@pytest.mark.asyncio
async def test_token_signed_with_other_secret_raises():
    token = jwt.encode({"sub": str(uuid.uuid4()), "tenant_id": str(uuid.uuid4())}, "other-secret", algorithm="HS256")

    with pytest.raises(UnauthorizedException):
        await require_auth(_request(), _bearer(token))


@pytest.mark.asyncio
async def test_issuer_checked_when_configured(monkeypatch):
    monkeypatch.setattr(settings, "auth_issuer", "https://platform.test")

    with pytest.raises(UnauthorizedException):
        await require_auth(_request(), _bearer(_token(iss="https://evil.test")))

    auth = await require_auth(_request(), _bearer(_token(iss="https://platform.test")))
    assert auth.tenant_slug == "acme"


@pytest.mark.asyncio
async def test_get_auth_context_returns_none_instead_of_raising():
    assert await get_auth_context(_request(), None) is None
    assert await get_auth_context(_request(), _bearer("garbage")) is None


@pytest.mark.asyncio
async def test_get_auth_context_resolves_valid_token():
    tenant_id = uuid.uuid4()
    auth = await get_auth_context(_request(), _bearer(_token(tenant_id=str(tenant_id))))
    assert auth is not None
    assert auth.tenant_id == tenant_id
