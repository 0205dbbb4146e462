"""Project service - owner-scoped project CRUD.

Every lookup filters on the owner, so a project belonging to someone else is
indistinguishable from one that does not exist.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.party_planner.core.exceptions import NotFound
from src.party_planner.core.logging import get_logger
from src.party_planner.models import DEFAULT_DUE_DATE, Project
from src.party_planner.models.base import utc_now
from src.party_planner.repositories import ProjectRepository
from src.party_planner.schemas.project import ProjectCreate, ProjectUpdate

logger = get_logger(__name__)


class ProjectService:
    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        self.project_repo = project_repo
        self.session = session

    async def get_owned(self, project_id: UUID, owner_id: UUID) -> Project:
        """Fetch a project owned by ``owner_id`` or raise NotFound."""
        project = await self.project_repo.get_owned(project_id, owner_id)
        if project is None:
            raise NotFound("Could not find project", error_code="project_not_found")
        return project

    async def list_projects(self, owner_id: UUID) -> list[Project]:
        return await self.project_repo.list_by_owner(owner_id)

    async def create(self, owner_id: UUID, data: ProjectCreate) -> Project:
        project = Project(
            name=data.name,
            due_date=data.due_date or DEFAULT_DUE_DATE,
            owner_id=owner_id,
        )
        self.project_repo.add(project)
        await self.commit()
        await self.session.refresh(project)
        logger.info("Project created", project_id=str(project.id))
        return project

    async def update(self, project_id: UUID, owner_id: UUID, data: ProjectUpdate) -> Project:
        """Overwrite only the fields present in ``data``."""
        project = await self.get_owned(project_id, owner_id)

        update_data = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None
        }
        for field, value in update_data.items():
            setattr(project, field, value)

        if update_data:
            project.updated_at = utc_now()
            await self.commit()
            logger.info(
                "Project updated", project_id=str(project.id), fields=sorted(update_data)
            )
        return project

    async def delete(self, project_id: UUID, owner_id: UUID) -> None:
        project = await self.get_owned(project_id, owner_id)
        await self.project_repo.delete(project)
        await self.commit()
        logger.info("Project deleted", project_id=str(project_id))

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
