"""Item service — tenant-scoped reads and inserts for example items."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_app.database.tenant import with_tenant
from tenant_app.exceptions import ValidationException
from tenant_app.models.example_item import ExampleItem
from tenant_app.modules.items.constants import DEFAULT_PRIORITY, TITLE_REQUIRED_MESSAGE
from tenant_app.modules.items.schemas import ItemCreate
from tenant_app.modules.tenancy.auth import AuthContext

logger = logging.getLogger(__name__)


class ItemService:
    """All item access runs inside with_tenant; RLS restricts rows to the caller's tenant.

    The explicit tenant_id filters below are a second line, not the guarantee.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def list_items(self, auth: AuthContext) -> list[ExampleItem]:
        async def _query(tx: AsyncSession) -> list[ExampleItem]:
            result = await tx.execute(
                select(ExampleItem)
                .where(ExampleItem.tenant_id == auth.tenant_id)
                .order_by(ExampleItem.created_at.desc())
            )
            return list(result.scalars().all())

        return await with_tenant(self.db, auth.tenant_id, _query)

    async def recent_items(self, auth: AuthContext, limit: int) -> list[ExampleItem]:
        """Newest ``limit`` items for the dashboard."""

        async def _query(tx: AsyncSession) -> list[ExampleItem]:
            result = await tx.execute(
                select(ExampleItem)
                .where(ExampleItem.tenant_id == auth.tenant_id)
                .order_by(ExampleItem.created_at.desc())
                .limit(limit)
            )
            return list(result.scalars().all())

        return await with_tenant(self.db, auth.tenant_id, _query)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create_item(self, auth: AuthContext, payload: ItemCreate) -> ExampleItem:
        """Insert a new item owned by the caller's tenant.

        Raises ValidationException before touching the database when the
        title is missing or blank.
        """
        if not (payload.title or "").strip():
            raise ValidationException(
                TITLE_REQUIRED_MESSAGE,
                details=[{"field": "title", "message": TITLE_REQUIRED_MESSAGE}],
            )

        async def _insert(tx: AsyncSession) -> ExampleItem:
            item = ExampleItem(
                tenant_id=auth.tenant_id,
                title=payload.title,
                description=payload.description,
                priority=payload.priority if payload.priority is not None else DEFAULT_PRIORITY,
            )
            tx.add(item)
            await tx.flush()
            return item

        item = await with_tenant(self.db, auth.tenant_id, _insert)
        logger.info("Created item %s for tenant=%s user=%s", item.id, auth.tenant_id, auth.user_id)
        return item
