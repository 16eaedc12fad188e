"""Centralized API router — all JSON module routers are included here."""

from fastapi import APIRouter

from tenant_app.modules.health.router import router as health_router
from tenant_app.modules.items.router import router as items_router

api_router = APIRouter(prefix="/api")
api_router.include_router(items_router)
api_router.include_router(health_router)
