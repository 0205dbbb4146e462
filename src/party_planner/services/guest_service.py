"""Guest list service - guests embedded in a project."""

from uuid import UUID, uuid7

from src.party_planner.core.exceptions import NotFound
from src.party_planner.core.logging import get_logger
from src.party_planner.models import Project
from src.party_planner.models.base import utc_now
from src.party_planner.schemas.project import GuestCreate
from src.party_planner.services.project_service import ProjectService

logger = get_logger(__name__)


class GuestService:
    def __init__(self, project_service: ProjectService):
        self.project_service = project_service

    async def add_guest(self, project_id: UUID, owner_id: UUID, data: GuestCreate) -> Project:
        """Append a guest with a fresh id and return the updated project."""
        project = await self.project_service.get_owned(project_id, owner_id)

        guest = {"id": str(uuid7()), "guest_name": data.guest_name, "phone": data.phone}
        project.guest_list = [*project.guest_list, guest]
        project.updated_at = utc_now()
        await self.project_service.commit()

        logger.info("Guest added", project_id=str(project_id), guest_id=guest["id"])
        return project

    async def remove_guest(self, project_id: UUID, owner_id: UUID, guest_id: UUID) -> Project:
        """Remove one guest.

        Raises NotFound with error code ``project_not_found`` or
        ``guest_not_found`` depending on which lookup failed.
        """
        project = await self.project_service.get_owned(project_id, owner_id)

        remaining = [guest for guest in project.guest_list if guest.get("id") != str(guest_id)]
        if len(remaining) == len(project.guest_list):
            raise NotFound("Guest not found", error_code="guest_not_found")

        project.guest_list = remaining
        project.updated_at = utc_now()
        await self.project_service.commit()

        logger.info("Guest removed", project_id=str(project_id), guest_id=str(guest_id))
        return project
