"""Repository for Project entity."""

from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select

from src.party_planner.models import Project
from src.party_planner.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    model = Project

    async def list_by_owner(self, owner_id: UUID) -> list[Project]:
        """All projects owned by a user, newest first."""
        result = await self.session.execute(
            select(Project)
            .where(Project.owner_id == owner_id)
            .order_by(Project.created_at.desc(), Project.id.desc())  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())

    async def get_owned(self, project_id: UUID, owner_id: UUID) -> Project | None:
        """Get a project only if ``owner_id`` owns it."""
        result = await self.session.execute(
            select(Project).where(Project.id == project_id, Project.owner_id == owner_id)
        )
        return result.scalar_one_or_none()

    async def delete_by_owner(self, owner_id: UUID) -> None:
        """Remove every project owned by a user (no commit)."""
        await self.session.execute(delete(Project).where(Project.owner_id == owner_id))
