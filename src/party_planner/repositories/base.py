"""Generic data access shared by the repositories."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select


class BaseRepository[ModelType: SQLModel]:
    """Lookups and staging for one table.

    Nothing here commits: the calling service owns the transaction.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: UUID) -> ModelType | None:
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    def add(self, entity: ModelType) -> None:
        """Stage a new row."""
        self.session.add(entity)

    async def delete(self, entity: ModelType) -> None:
        """Stage a row for deletion."""
        await self.session.delete(entity)
