"""Transaction-scoped tenant context for PostgreSQL row-level security."""

import logging
import uuid
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

T = TypeVar("T")

SESSION_VAR_TENANT_ID = "app.current_tenant_id"
SESSION_VAR_BYPASS_RLS = "app.bypass_rls"


async def set_tenant_context(session: AsyncSession, tenant_id: uuid.UUID | str) -> None:
    """Set PostgreSQL session variables for RLS tenant isolation.

    Uses set_config(..., true) so the variables are scoped to the current
    transaction and vanish on commit or rollback.
    """
    await session.execute(
        text("SELECT set_config(:name, :tenant_id, true)"),
        {"name": SESSION_VAR_TENANT_ID, "tenant_id": str(tenant_id)},
    )
    await session.execute(
        text("SELECT set_config(:name, 'false', true)"),
        {"name": SESSION_VAR_BYPASS_RLS},
    )


async def set_rls_bypass(session: AsyncSession, *, enable: bool = True) -> None:
    """Enable or disable the RLS bypass flag for the current transaction."""
    await session.execute(
        text("SELECT set_config(:name, :val, true)"),
        {"name": SESSION_VAR_BYPASS_RLS, "val": "true" if enable else "false"},
    )


async def with_tenant(
    session: AsyncSession,
    tenant_id: uuid.UUID,
    callback: Callable[[AsyncSession], Awaitable[T]],
) -> T:
    """Execute a callback within a transaction that has the RLS tenant set.

    The tenant variable is transaction-scoped, so it cannot leak to the next
    user of the pooled connection. If the callback or the commit fails, the
    transaction is rolled back and the error propagates.

    Args:
        session: The async database session.
        tenant_id: The authenticated caller's tenant. Never take this from
            request payloads.
        callback: An async callable that receives the session and returns a result.

    Returns:
        The result of the callback.
    """
    try:
        await set_tenant_context(session, tenant_id)
        result = await callback(session)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return result


async def without_rls(
    session: AsyncSession,
    callback: Callable[[AsyncSession], Awaitable[T]],
    *,
    reason: str,
) -> T:
    """Execute a callback with the RLS bypass flag enabled.

    For maintenance jobs that legitimately span tenants (backfills, exports).
    Request handlers must use with_tenant instead.
    """
    logger.warning("RLS bypass enabled: %s", reason)
    try:
        await set_rls_bypass(session, enable=True)
        result = await callback(session)
        await set_rls_bypass(session, enable=False)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return result
