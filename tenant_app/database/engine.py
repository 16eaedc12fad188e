from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from tenant_app.config import Settings


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the process-wide pooled engine. Called once from the app lifespan."""
    return create_async_engine(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_pre_ping=True,
        pool_recycle=3600,
        echo=settings.environment == "development",
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


def get_engine(request: Request) -> AsyncEngine:
    """FastAPI dependency returning the engine created at startup."""
    return request.app.state.engine
