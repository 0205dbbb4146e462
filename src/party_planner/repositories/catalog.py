"""Repository for the catalog collections.

One repository class serves all five collections; the model is chosen per
instance instead of per subclass.
"""

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from src.party_planner.models import CATALOG_MODELS, CatalogCollection, CatalogItemBase
from src.party_planner.repositories.base import BaseRepository


class CatalogRepository(BaseRepository[CatalogItemBase]):
    def __init__(self, session: AsyncSession, collection: CatalogCollection):
        super().__init__(session)
        self.collection = collection
        self.model = CATALOG_MODELS[collection]

    async def list_all(self) -> list[CatalogItemBase]:
        result = await self.session.execute(select(self.model).order_by(self.model.name))
        return list(result.scalars().all())

    async def list_by_type(self, tag: str) -> list[CatalogItemBase]:
        """Items carrying ``tag`` among their type tags.

        Tags live in a JSON list whose containment operators differ per
        backend, and catalogs are small, so matching happens here.
        """
        return [item for item in await self.list_all() if tag in (item.type or [])]

    async def delete_all(self) -> None:
        """Remove every item in the collection (no commit)."""
        await self.session.execute(delete(self.model))
