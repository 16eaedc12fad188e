"""DDL builders for tenant row-level security policies."""

import re

from tenant_app.database.tenant import SESSION_VAR_BYPASS_RLS, SESSION_VAR_TENANT_ID

_IDENTIFIER = re.compile(r"^[a-z_][a-z0-9_]*$")


def _check_identifier(name: str) -> str:
    if not _IDENTIFIER.match(name):
        raise ValueError(f"Invalid SQL identifier: {name!r}")
    return name


def policy_name(table_name: str) -> str:
    return f"{_check_identifier(table_name)}_tenant_isolation"


def tenant_predicate(column: str = "tenant_id") -> str:
    """SQL predicate matching rows owned by the transaction's tenant.

    An unset or empty tenant variable matches nothing.
    """
    column = _check_identifier(column)
    return (
        f"{column} = NULLIF(current_setting('{SESSION_VAR_TENANT_ID}', true), '')::uuid"
        f" OR COALESCE(current_setting('{SESSION_VAR_BYPASS_RLS}', true), 'false') = 'true'"
    )


def tenant_rls_policy(table_name: str, column: str = "tenant_id") -> list[str]:
    """Return the statements that put ``table_name`` under tenant isolation.

    FORCE is required so the table owner (usually the app's own role) is
    subject to the policy as well. The same predicate guards reads (USING)
    and writes (WITH CHECK), so rows cannot be inserted or moved into
    another tenant.
    """
    table_name = _check_identifier(table_name)
    name = policy_name(table_name)
    predicate = tenant_predicate(column)
    return [
        f"ALTER TABLE {table_name} ENABLE ROW LEVEL SECURITY",
        f"ALTER TABLE {table_name} FORCE ROW LEVEL SECURITY",
        f"DROP POLICY IF EXISTS {name} ON {table_name}",
        f"CREATE POLICY {name} ON {table_name} USING ({predicate}) WITH CHECK ({predicate})",
    ]


def drop_tenant_rls_policy(table_name: str) -> list[str]:
    table_name = _check_identifier(table_name)
    return [
        f"DROP POLICY IF EXISTS {policy_name(table_name)} ON {table_name}",
        f"ALTER TABLE {table_name} NO FORCE ROW LEVEL SECURITY",
        f"ALTER TABLE {table_name} DISABLE ROW LEVEL SECURITY",
    ]
