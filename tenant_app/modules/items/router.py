"""Example items API router — list and create, tenant isolated."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_app.config import settings
from tenant_app.database.session import get_db
from tenant_app.exceptions import ValidationException
from tenant_app.limiter import limiter
from tenant_app.modules.items.schemas import ItemCreate, ItemEnvelope, ItemListResponse, ItemResponse
from tenant_app.modules.items.service import ItemService
from tenant_app.modules.tenancy.auth import AuthContext, require_auth

router = APIRouter(prefix="/example", tags=["example"])


def _parse_create_body(raw: bytes) -> ItemCreate:
    """Validate the POST body, reporting failures in the API's 400 shape."""
    try:
        return ItemCreate.model_validate_json(raw or b"{}")
    except ValidationError as exc:
        details = [
            {"field": ".".join(str(part) for part in ("body", *err["loc"])), "message": err["msg"]}
            for err in exc.errors()
        ]
        raise ValidationException("Validation failed", details=details) from exc


@router.get("", response_model=ItemListResponse)
async def list_items(
    auth: AuthContext = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
):
    """List every item belonging to the caller's tenant."""
    svc = ItemService(db)
    items = await svc.list_items(auth)
    return ItemListResponse(items=[ItemResponse.model_validate(item) for item in items])


@router.post(
    "",
    response_model=ItemEnvelope,
    status_code=201,
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": ItemCreate.model_json_schema()}},
            "required": True,
        }
    },
)
@limiter.limit(settings.rate_limit_write)
async def create_item(
    request: Request,
    auth: AuthContext = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
):
    """Create an item. The owning tenant always comes from the auth context.

    The body is read here rather than declared as a parameter so that an
    unauthenticated caller gets 401 before any body validation happens.
    """
    body = _parse_create_body(await request.body())
    svc = ItemService(db)
    item = await svc.create_item(auth, body)
    return ItemEnvelope(item=ItemResponse.model_validate(item))
