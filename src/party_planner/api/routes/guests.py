"""Guest list endpoints."""

from uuid import UUID

from fastapi import APIRouter

from src.party_planner.api.dependencies import GuestServiceDep, PathUser
from src.party_planner.schemas import Envelope, GuestCreate, ProjectRead, ok

router = APIRouter(
    prefix="/{user_id}/project-board/projects/{project_id}", tags=["guests"]
)


@router.post(
    "/addGuest",
    response_model=Envelope[ProjectRead],
    responses={404: {"description": "Project not found"}},
)
async def add_guest(
    project_id: UUID, data: GuestCreate, user: PathUser, service: GuestServiceDep
) -> Envelope[ProjectRead]:
    project = await service.add_guest(project_id, user.id, data)
    return ok(ProjectRead.from_model(project))


@router.delete(
    "/delete/{guest_id}",
    response_model=Envelope[ProjectRead],
    responses={
        404: {"description": "Project not found (project_not_found) or guest not found (guest_not_found)"}
    },
)
async def remove_guest(
    project_id: UUID, guest_id: UUID, user: PathUser, service: GuestServiceDep
) -> Envelope[ProjectRead]:
    project = await service.remove_guest(project_id, user.id, guest_id)
    return ok(ProjectRead.from_model(project))
