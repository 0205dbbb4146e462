"""Tests for reseeding the catalog."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.party_planner.core.config import get_settings
from src.party_planner.core.db import Database
from src.party_planner.main import create_app
from src.party_planner.models import CatalogCollection, User
from src.party_planner.repositories import CatalogRepository
from src.party_planner.seed import load_seed_records, seed_catalog
from tests.factories import ThemeFactory
from tests.helpers import auth_headers

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def test_seed_replaces_existing_items(db_session: AsyncSession) -> None:
    db_session.add(ThemeFactory.build(name="Stale Theme"))
    await db_session.commit()

    counts = await seed_catalog(db_session)

    themes = await CatalogRepository(db_session, CatalogCollection.THEMES).list_all()
    assert "Stale Theme" not in {theme.name for theme in themes}
    assert counts["themes"] == len(themes) == len(load_seed_records(CatalogCollection.THEMES))


async def test_seed_is_repeatable(db_session: AsyncSession) -> None:
    first = await seed_catalog(db_session)
    second = await seed_catalog(db_session)

    assert first == second
    drinks = await CatalogRepository(db_session, CatalogCollection.DRINKS).list_all()
    assert len(drinks) == second["drinks"]


async def test_seeded_catalog_is_served(
    client: AsyncClient, db_session: AsyncSession, test_user: User
) -> None:
    await seed_catalog(db_session)

    response = await client.get("/activities/type/outdoor", headers=auth_headers(test_user))

    assert response.status_code == 200
    assert {item["name"] for item in response.json()["response"]} == {"Croquet", "Treasure Hunt"}


@pytest.fixture
def reset_db_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("RESET_DB", "true")
    get_settings.cache_clear()
    yield
    monkeypatch.delenv("RESET_DB")
    get_settings.cache_clear()


@pytest.mark.usefixtures("reset_db_env")
async def test_startup_with_reset_db_reseeds_catalog(database: Database, db_session: AsyncSession) -> None:
    db_session.add(ThemeFactory.build(name="Stale Theme"))
    await db_session.commit()
    app = create_app(database=database)

    async with app.router.lifespan_context(app):
        themes = await CatalogRepository(db_session, CatalogCollection.THEMES).list_all()

    assert "Stale Theme" not in {theme.name for theme in themes}
    assert len(themes) == len(load_seed_records(CatalogCollection.THEMES))
    # An injected store outlives the app
    assert app.state.database is database


async def test_startup_without_reset_db_leaves_catalog(database: Database, db_session: AsyncSession) -> None:
    db_session.add(ThemeFactory.build(name="Kept Theme"))
    await db_session.commit()
    app = create_app(database=database)

    async with app.router.lifespan_context(app):
        themes = await CatalogRepository(db_session, CatalogCollection.THEMES).list_all()

    assert [theme.name for theme in themes] == ["Kept Theme"]
