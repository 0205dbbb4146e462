"""Tests for the read-only catalog endpoints."""

from uuid import uuid7

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.party_planner.models import CatalogCollection, User
from tests.factories import (
    ActivityFactory,
    DecorationFactory,
    DrinkFactory,
    FoodFactory,
    ThemeFactory,
)
from tests.helpers import auth_headers

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]

FACTORIES = {
    CatalogCollection.THEMES: ThemeFactory,
    CatalogCollection.DECORATIONS: DecorationFactory,
    CatalogCollection.FOOD: FoodFactory,
    CatalogCollection.DRINKS: DrinkFactory,
    CatalogCollection.ACTIVITIES: ActivityFactory,
}


@pytest.mark.parametrize("collection", list(CatalogCollection))
async def test_list_collection(
    collection: CatalogCollection,
    client: AsyncClient,
    db_session: AsyncSession,
    test_user: User,
) -> None:
    factory = FACTORIES[collection]
    db_session.add_all([factory.build(name="Bravo"), factory.build(name="Alpha")])
    await db_session.commit()

    response = await client.get(f"/{collection.value}", headers=auth_headers(test_user))

    assert response.status_code == 200
    items = response.json()["response"]
    assert [item["name"] for item in items] == ["Alpha", "Bravo"]
    assert all("_id" in item for item in items)


async def test_empty_collection_is_empty_list(client: AsyncClient, test_user: User) -> None:
    response = await client.get("/drinks", headers=auth_headers(test_user))

    assert response.status_code == 200
    assert response.json() == {"success": True, "response": []}


async def test_theme_has_no_belongs_to_themes(
    client: AsyncClient, db_session: AsyncSession, test_user: User
) -> None:
    theme = ThemeFactory.build(name="Pirates")
    drink = DrinkFactory.build(name="Rum Punch", belongs_to_themes=["Pirates"])
    db_session.add_all([theme, drink])
    await db_session.commit()

    theme_response = await client.get(f"/themes/{theme.id}", headers=auth_headers(test_user))
    drink_response = await client.get(f"/drinks/{drink.id}", headers=auth_headers(test_user))

    assert "belongs_to_themes" not in theme_response.json()["response"]
    assert drink_response.json()["response"]["belongs_to_themes"] == ["Pirates"]


async def test_get_item_by_id(
    client: AsyncClient, db_session: AsyncSession, test_user: User
) -> None:
    food = FoodFactory.build(name="Cupcakes", type=["sweet"])
    db_session.add(food)
    await db_session.commit()

    response = await client.get(f"/food/{food.id}", headers=auth_headers(test_user))

    assert response.status_code == 200
    item = response.json()["response"]
    assert item["_id"] == str(food.id)
    assert item["name"] == "Cupcakes"
    assert item["type"] == ["sweet"]


async def test_item_from_another_collection_is_not_found(
    client: AsyncClient, db_session: AsyncSession, test_user: User
) -> None:
    drink = DrinkFactory.build()
    db_session.add(drink)
    await db_session.commit()

    response = await client.get(f"/food/{drink.id}", headers=auth_headers(test_user))

    assert response.status_code == 404


async def test_unknown_id_is_404_malformed_id_is_400(
    client: AsyncClient, test_user: User
) -> None:
    unknown = await client.get(f"/themes/{uuid7()}", headers=auth_headers(test_user))
    malformed = await client.get("/themes/not-an-id", headers=auth_headers(test_user))

    assert unknown.status_code == 404
    assert unknown.json()["error"] == "not_found"
    assert malformed.status_code == 400
    assert malformed.json()["error"] == "validation_error"


async def test_filter_by_type(
    client: AsyncClient, db_session: AsyncSession, test_user: User
) -> None:
    db_session.add_all(
        [
            ActivityFactory.build(name="Treasure Hunt", type=["kids", "outdoor"]),
            ActivityFactory.build(name="Karaoke", type=["adults", "indoor"]),
            ActivityFactory.build(name="Croquet", type=["outdoor"]),
        ]
    )
    await db_session.commit()

    response = await client.get("/activities/type/outdoor", headers=auth_headers(test_user))

    assert response.status_code == 200
    names = [item["name"] for item in response.json()["response"]]
    assert names == ["Croquet", "Treasure Hunt"]


async def test_filter_by_absent_type_is_empty(
    client: AsyncClient, db_session: AsyncSession, test_user: User
) -> None:
    db_session.add(ThemeFactory.build(type=["kids"]))
    await db_session.commit()

    response = await client.get("/themes/type/underwater", headers=auth_headers(test_user))

    assert response.status_code == 200
    assert response.json()["response"] == []


async def test_catalog_requires_authentication(client: AsyncClient) -> None:
    response = await client.get("/food/type/sweet")

    assert response.status_code == 401
