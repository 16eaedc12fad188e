"""ExampleItem model — the template's tenant-owned record."""

from __future__ import annotations

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from tenant_app.database.base import Base, TenantScopedMixin, TimestampMixin, UUIDPrimaryKeyMixin
from tenant_app.models.enums import ItemStatus


class ExampleItem(UUIDPrimaryKeyMixin, TenantScopedMixin, TimestampMixin, Base):
    __tablename__ = "example_items"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=ItemStatus.PENDING.value,
        server_default=ItemStatus.PENDING.value,
    )
    priority: Mapped[int | None] = mapped_column(Integer, default=0, server_default="0")

    # Fetch id and timestamps via RETURNING on insert
    __mapper_args__ = {"eager_defaults": True}
