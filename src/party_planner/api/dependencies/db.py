"""Database session dependency."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.party_planner.core.db import Database
from src.party_planner.core.exceptions import StoreUnavailable


def get_database(request: Request) -> Database:
    """Return the store handle opened by the app lifespan (or injected by tests)."""
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None:
        raise StoreUnavailable()
    return database


async def get_db_session(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession]:
    """One session per request."""
    async with database.session() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
