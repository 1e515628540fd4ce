from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from groupledger.core.config import settings


def create_engine(database_url: str = settings.database_url) -> AsyncEngine:
    engine_kwargs: dict = {"echo": settings.sql_echo, "pool_pre_ping": True}
    if not database_url.startswith("sqlite"):
        engine_kwargs["pool_size"] = settings.database_pool_size
        engine_kwargs["max_overflow"] = settings.database_max_overflow
    return create_async_engine(database_url, **engine_kwargs)


engine = create_engine()
AsyncSessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)
