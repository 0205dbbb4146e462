"""Catalog endpoints: one read-only router per collection."""

from uuid import UUID

from fastapi import APIRouter

from src.party_planner.api.dependencies import CatalogServiceDep, CurrentUser
from src.party_planner.models import CatalogCollection
from src.party_planner.schemas import CatalogItemRead, Envelope, ok


def create_catalog_router(collection: CatalogCollection) -> APIRouter:
    router = APIRouter(prefix=f"/{collection.value}", tags=["catalog"])

    @router.get(
        "",
        response_model=Envelope[list[CatalogItemRead]],
        response_model_exclude_none=True,
        name=f"list_{collection.value}",
    )
    async def list_items(
        _user: CurrentUser, service: CatalogServiceDep
    ) -> Envelope[list[CatalogItemRead]]:
        items = await service.list_items(collection)
        return ok([CatalogItemRead.from_model(item) for item in items])

    @router.get(
        "/type/{tag}",
        response_model=Envelope[list[CatalogItemRead]],
        response_model_exclude_none=True,
        name=f"list_{collection.value}_by_type",
    )
    async def list_items_by_type(
        tag: str, _user: CurrentUser, service: CatalogServiceDep
    ) -> Envelope[list[CatalogItemRead]]:
        """Items tagged with ``tag``; an empty list when none match."""
        items = await service.list_by_type(collection, tag)
        return ok([CatalogItemRead.from_model(item) for item in items])

    @router.get(
        "/{item_id}",
        response_model=Envelope[CatalogItemRead],
        response_model_exclude_none=True,
        name=f"get_{collection.value}_item",
        responses={
            400: {"description": "Malformed id"},
            404: {"description": "Id not found"},
        },
    )
    async def get_item(
        item_id: UUID, _user: CurrentUser, service: CatalogServiceDep
    ) -> Envelope[CatalogItemRead]:
        item = await service.get_item(collection, item_id)
        return ok(CatalogItemRead.from_model(item))

    return router


routers = [create_catalog_router(collection) for collection in CatalogCollection]
