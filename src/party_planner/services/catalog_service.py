"""Read-only access to the catalog collections."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.party_planner.core.exceptions import NotFound
from src.party_planner.models import CatalogCollection, CatalogItemBase
from src.party_planner.repositories import CatalogRepository


class CatalogService:
    """Each collection is served independently; nothing is joined across them."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _repo(self, collection: CatalogCollection) -> CatalogRepository:
        return CatalogRepository(self.session, collection)

    async def list_items(self, collection: CatalogCollection) -> list[CatalogItemBase]:
        return await self._repo(collection).list_all()

    async def get_item(self, collection: CatalogCollection, item_id: UUID) -> CatalogItemBase:
        item = await self._repo(collection).get_by_id(item_id)
        if item is None:
            raise NotFound("Id not found, try another")
        return item

    async def list_by_type(self, collection: CatalogCollection, tag: str) -> list[CatalogItemBase]:
        """Items tagged with ``tag``; an unknown tag simply yields an empty list."""
        return await self._repo(collection).list_by_type(tag)
