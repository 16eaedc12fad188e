"""Tenancy module — request authentication and tenant-scoped data access."""

from tenant_app.database.tenant import with_tenant, without_rls
from tenant_app.modules.tenancy.auth import AuthContext, get_auth_context, require_auth

__all__ = [
    # Auth
    "AuthContext",
    "require_auth",
    "get_auth_context",
    # Tenant scoping
    "with_tenant",
    "without_rls",
]
