"""Pydantic v2 schemas for the example items API."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class ItemCreate(BaseModel):
    """POST body. Anything else the client sends, tenant ids included, is dropped."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    description: str | None = None
    # Postgres INTEGER range
    priority: int | None = Field(default=None, ge=-(2**31), le=2**31 - 1)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class ItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: uuid.UUID
    tenant_id: uuid.UUID
    title: str
    description: str | None = None
    status: str
    priority: int | None = None
    created_at: datetime
    updated_at: datetime


class ItemListResponse(BaseModel):
    items: list[ItemResponse]


class ItemEnvelope(BaseModel):
    item: ItemResponse
