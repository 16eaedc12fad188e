"""Tests for the RLS policy DDL builders."""

import pytest

from tenant_app.database.policies import drop_tenant_rls_policy, tenant_predicate, tenant_rls_policy


def test_policy_enables_and_forces_rls():
    statements = tenant_rls_policy("example_items")

    assert statements[0] == "ALTER TABLE example_items ENABLE ROW LEVEL SECURITY"
    assert statements[1] == "ALTER TABLE example_items FORCE ROW LEVEL SECURITY"
    assert statements[2] == "DROP POLICY IF EXISTS example_items_tenant_isolation ON example_items"


def test_policy_guards_reads_and_writes_with_same_predicate():
    create = tenant_rls_policy("example_items")[-1]
    predicate = tenant_predicate()

    assert create.startswith("CREATE POLICY example_items_tenant_isolation ON example_items")
    assert f"USING ({predicate})" in create
    assert f"WITH CHECK ({predicate})" in create


def test_predicate_reads_transaction_tenant():
    predicate = tenant_predicate("owner_tenant")

    assert predicate.startswith("owner_tenant = NULLIF(current_setting('app.current_tenant_id', true), '')::uuid")
    assert "app.bypass_rls" in predicate


@pytest.mark.parametrize("name", ["items; DROP TABLE users", "Items", "1items", ""])
def test_rejects_unsafe_identifiers(name):
    with pytest.raises(ValueError):
        tenant_rls_policy(name)


def test_drop_policy_reverses_setup():
    assert drop_tenant_rls_policy("example_items") == [
        "DROP POLICY IF EXISTS example_items_tenant_isolation ON example_items",
        "ALTER TABLE example_items NO FORCE ROW LEVEL SECURITY",
        "ALTER TABLE example_items DISABLE ROW LEVEL SECURITY",
    ]
