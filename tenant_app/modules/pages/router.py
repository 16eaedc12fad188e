"""Server-rendered pages: the dashboard and the logout action."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_app.config import settings
from tenant_app.database.session import get_db
from tenant_app.modules.items.constants import DASHBOARD_RECENT_LIMIT
from tenant_app.modules.items.service import ItemService
from tenant_app.modules.pages.rendering import render_dashboard, render_unauthenticated
from tenant_app.modules.tenancy.auth import AuthContext, get_auth_context

router = APIRouter(tags=["pages"])


def _page_title() -> str:
    return f"App Template | {settings.app_name}"


@router.get("/", response_class=HTMLResponse)
async def dashboard(
    auth: AuthContext | None = Depends(get_auth_context),
    db: AsyncSession = Depends(get_db),
):
    if auth is None:
        return HTMLResponse(content=render_unauthenticated(_page_title(), settings.platform_url))

    svc = ItemService(db)
    items = await svc.recent_items(auth, limit=DASHBOARD_RECENT_LIMIT)
    return HTMLResponse(content=render_dashboard(_page_title(), auth, items))


@router.api_route("/logout", methods=["GET", "POST"])
async def logout() -> RedirectResponse:
    """Hand the session back to the platform, which owns sign-out."""
    return RedirectResponse(url=f"{settings.platform_url}/logout", status_code=303)
