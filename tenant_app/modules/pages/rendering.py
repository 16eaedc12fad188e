"""HTML rendering for the server-side dashboard pages."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from html import escape

from tenant_app.models.enums import ItemStatus
from tenant_app.models.example_item import ExampleItem
from tenant_app.modules.tenancy.auth import AuthContext

_STYLE = """
body { font-family: system-ui, sans-serif; margin: 0; background: #fafafa; color: #111; }
main { max-width: 960px; margin: 0 auto; padding: 2rem; }
.card { background: #fff; border: 1px solid #e5e5e5; border-radius: 8px; padding: 1.5rem; margin-bottom: 1.5rem; }
.grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 1rem; }
.muted { color: #737373; }
.mono { font-family: ui-monospace, monospace; }
.stat { font-size: 2rem; font-weight: 700; margin-top: .5rem; }
ul.items { list-style: none; padding: 0; }
ul.items li { display: flex; justify-content: space-between; padding: .5rem; border: 1px solid #e5e5e5; border-radius: 4px; margin-bottom: .5rem; }
"""


def status_counts(items: Iterable[ExampleItem]) -> dict[str, int]:
    """Total plus per-status counts over the given items."""
    items = list(items)
    counts = Counter(item.status for item in items)
    return {
        "total": len(items),
        ItemStatus.PENDING.value: counts[ItemStatus.PENDING.value],
        ItemStatus.COMPLETED.value: counts[ItemStatus.COMPLETED.value],
    }


def render_layout(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{escape(title)}</title>\n"
        f"<style>{_STYLE}</style>\n"
        "</head>\n"
        f"<body><main>{body}</main></body>\n"
        "</html>\n"
    )


def _auth_card(auth: AuthContext | None) -> str:
    rows = [
        ("Tenant ID", str(auth.tenant_id) if auth else "Not set"),
        ("Tenant Slug", (auth.tenant_slug or "Not set") if auth else "Not set"),
        ("User ID", str(auth.user_id) if auth else "Not authenticated"),
        ("Status", "Connected" if auth else "Standalone"),
    ]
    cells = "".join(
        f'<div><span class="muted">{escape(label)}:</span><p class="mono">{escape(value)}</p></div>'
        for label, value in rows
    )
    return f'<section class="card"><h2>Authentication Context</h2><div class="grid">{cells}</div></section>'


def _header() -> str:
    return '<header><h1>Dashboard</h1><p class="muted">Welcome to your app template</p></header>'


def render_unauthenticated(app_title: str, platform_url: str) -> str:
    body = (
        _header()
        + _auth_card(None)
        + '<section class="card"><h2>Not signed in</h2>'
        f'<p class="muted">Open this app from <a href="{escape(platform_url)}">the platform</a> '
        "to sign in and see your items.</p></section>"
    )
    return render_layout(app_title, body)


def render_dashboard(app_title: str, auth: AuthContext, items: list[ExampleItem]) -> str:
    counts = status_counts(items)
    stats = "".join(
        f'<div class="card"><h3 class="muted">{label}</h3><p class="stat">{value}</p></div>'
        for label, value in (
            ("Total Items", counts["total"]),
            ("Pending", counts[ItemStatus.PENDING.value]),
            ("Completed", counts[ItemStatus.COMPLETED.value]),
        )
    )

    if items:
        entries = "".join(
            f'<li><span>{escape(item.title)}</span><span class="muted">{escape(item.status)}</span></li>'
            for item in items
        )
        recent = f'<ul class="items">{entries}</ul>'
    else:
        recent = '<p class="muted">No items yet. Create your first item to get started.</p>'

    body = (
        _header()
        + _auth_card(auth)
        + f'<section class="grid">{stats}</section>'
        + f'<section class="card"><h2>Recent Items</h2>{recent}</section>'
        + '<form method="post" action="/logout"><button type="submit">Sign out</button></form>'
    )
    return render_layout(app_title, body)
