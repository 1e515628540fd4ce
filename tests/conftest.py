import os
from typing import AsyncGenerator

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from groupledger.api.dependencies import get_notifier, get_session
from groupledger.db import models  # noqa: F401
from groupledger.db.base import Base
from groupledger.main import app
from groupledger.schemas.notifications import LedgerNotification
from groupledger.services.ledger_engine import LedgerEngine
from groupledger.services.notifier import Notifier

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture(scope="function")
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database per test; StaticPool keeps one shared connection."""
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def notifications() -> list[LedgerNotification]:
    return []


@pytest.fixture
def notifier(notifications: list[LedgerNotification]) -> Notifier:
    return Notifier([notifications.append])


@pytest.fixture
def ledger(db_session: AsyncSession, notifier: Notifier) -> LedgerEngine:
    return LedgerEngine(db_session, notifier)


@pytest_asyncio.fixture(scope="function")
async def client(
    session_factory: async_sessionmaker[AsyncSession], notifier: Notifier
) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_notifier] = lambda: notifier

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def sample_group_name() -> str:
    return "Weekend trip"


@pytest.fixture
def alice() -> str:
    return "addr_alice"


@pytest.fixture
def bob() -> str:
    return "addr_bob"


@pytest.fixture
def carol() -> str:
    return "addr_carol"
