"""Readiness probe for load balancers and orchestrators."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from tenant_app.database.engine import get_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/ready")
async def readiness(engine: AsyncEngine = Depends(get_engine)) -> JSONResponse:
    """Report whether the database answers a trivial query.

    A failure is advertised as 503, never raised: the process itself is fine.
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as exc:
        logger.warning("Readiness check failed: %s", exc)
        return JSONResponse(status_code=503, content={"status": "not ready"})
    return JSONResponse(status_code=200, content={"status": "ready"})
