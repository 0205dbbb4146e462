"""Integration test fixtures for database and HTTP client operations.

The app runs against an in-memory SQLite database shared through a StaticPool,
so every session in a test sees the same data. The schema is built from model
metadata; no migrations run.
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from src.party_planner.core.db import Database
from src.party_planner.main import create_app
from src.party_planner.models import User
from tests.helpers import create_user


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def database(engine: AsyncEngine) -> Database:
    db = Database(engine)
    await db.create_all()
    return db


@pytest.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession]:
    """Session for arranging and inspecting data outside the app.

    Tests must call ``await session.commit()`` to make changes visible to the app.
    """
    async with database.session() as session:
        yield session


@pytest.fixture
def app(database: Database) -> FastAPI:
    return create_app(database=database)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client against the app (the lifespan does not run)."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
async def test_user(db_session: AsyncSession) -> User:
    return await create_user(db_session)


@pytest.fixture
async def other_user(db_session: AsyncSession) -> User:
    return await create_user(db_session)
