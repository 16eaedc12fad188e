from tenant_app.database.base import Base, TenantScopedMixin, TimestampMixin, UUIDPrimaryKeyMixin
from tenant_app.database.engine import build_engine, build_session_factory, get_engine
from tenant_app.database.policies import drop_tenant_rls_policy, tenant_rls_policy
from tenant_app.database.session import get_db
from tenant_app.database.tenant import set_rls_bypass, set_tenant_context, with_tenant, without_rls

__all__ = [
    "Base",
    "TenantScopedMixin",
    "TimestampMixin",
    "UUIDPrimaryKeyMixin",
    "build_engine",
    "build_session_factory",
    "get_engine",
    "get_db",
    "tenant_rls_policy",
    "drop_tenant_rls_policy",
    "set_tenant_context",
    "set_rls_bypass",
    "with_tenant",
    "without_rls",
]
