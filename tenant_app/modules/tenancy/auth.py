"""Platform session authentication for FastAPI.

The hosting platform signs a JWT for every session and hands it to the app
either as a Bearer token (API clients) or as a session cookie (browser
pages). This module verifies that token and turns its claims into an
AuthContext, the single value every data-access call takes.
"""

import logging
import uuid
from dataclasses import dataclass

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from tenant_app.config import settings
from tenant_app.exceptions import UnauthorizedException

logger = logging.getLogger(__name__)

# FastAPI security scheme: extracts Bearer token from Authorization header
_bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthContext:
    """Identity of the caller: which tenant, which user, which role."""

    tenant_id: uuid.UUID
    tenant_slug: str
    user_id: uuid.UUID
    role: str = "member"
    name: str | None = None
    email: str | None = None


def _decode_token(token: str) -> dict:
    """Decode and validate a JWT token. Raises UnauthorizedException on failure."""
    kwargs = {}
    if settings.auth_issuer:
        kwargs["issuer"] = settings.auth_issuer
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"verify_aud": False},
            **kwargs,
        )
    except JWTError as exc:
        logger.warning("JWT validation failed: %s", exc)
        raise UnauthorizedException("Invalid or expired token") from exc


def _extract_token(
    request: Request, credentials: HTTPAuthorizationCredentials | None
) -> str | None:
    if credentials is not None:
        return credentials.credentials
    return request.cookies.get(settings.session_cookie_name)


def _context_from_claims(payload: dict) -> AuthContext:
    try:
        return AuthContext(
            tenant_id=uuid.UUID(str(payload["tenant_id"])),
            tenant_slug=payload.get("tenant_slug", ""),
            user_id=uuid.UUID(str(payload["sub"])),
            role=payload.get("role", "member"),
            name=payload.get("name"),
            email=payload.get("email"),
        )
    except (KeyError, ValueError) as exc:
        raise UnauthorizedException("Token is missing required claims") from exc


async def require_auth(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> AuthContext:
    """FastAPI dependency for API routes: resolve the caller or fail with 401."""
    token = _extract_token(request, credentials)
    if not token:
        raise UnauthorizedException("Authentication required")
    return _context_from_claims(_decode_token(token))


async def get_auth_context(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> AuthContext | None:
    """Like require_auth but returns None instead of raising, for pages."""
    try:
        return await require_auth(request, credentials)
    except UnauthorizedException:
        return None
