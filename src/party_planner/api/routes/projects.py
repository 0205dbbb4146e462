"""Project endpoints - owner-scoped CRUD.

Every route resolves ``{user_id}`` against the authenticated user first, and
every project lookup filters on that owner.
"""

from uuid import UUID

from fastapi import APIRouter

from src.party_planner.api.dependencies import PathUser, ProjectServiceDep
from src.party_planner.schemas import Envelope, ProjectCreate, ProjectRead, ProjectUpdate, ok

router = APIRouter(prefix="/{user_id}/project-board/projects", tags=["projects"])


@router.get("", response_model=Envelope[list[ProjectRead]], summary="List projects")
async def list_projects(user: PathUser, service: ProjectServiceDep) -> Envelope[list[ProjectRead]]:
    """Projects owned by the user, newest first."""
    projects = await service.list_projects(user.id)
    return ok([ProjectRead.from_model(project) for project in projects])


@router.post(
    "/addProject",
    response_model=Envelope[ProjectRead],
    summary="Create project",
    responses={400: {"description": "Invalid project name"}},
)
async def create_project(
    data: ProjectCreate, user: PathUser, service: ProjectServiceDep
) -> Envelope[ProjectRead]:
    project = await service.create(user.id, data)
    return ok(ProjectRead.from_model(project))


@router.delete(
    "/delete/{project_id}",
    response_model=Envelope[str],
    summary="Delete project",
    responses={404: {"description": "Project not found"}},
)
async def delete_project(
    project_id: UUID, user: PathUser, service: ProjectServiceDep
) -> Envelope[str]:
    await service.delete(project_id, user.id)
    return ok("Project has been deleted")


@router.get(
    "/{project_id}",
    response_model=Envelope[ProjectRead],
    summary="Get project",
    responses={404: {"description": "Project not found"}},
)
async def get_project(
    project_id: UUID, user: PathUser, service: ProjectServiceDep
) -> Envelope[ProjectRead]:
    project = await service.get_owned(project_id, user.id)
    return ok(ProjectRead.from_model(project))


@router.patch(
    "/{project_id}",
    response_model=Envelope[ProjectRead],
    summary="Update project",
    responses={404: {"description": "Project not found"}},
)
async def update_project(
    project_id: UUID, data: ProjectUpdate, user: PathUser, service: ProjectServiceDep
) -> Envelope[ProjectRead]:
    """Partial update: fields left out of the body keep their values."""
    project = await service.update(project_id, user.id, data)
    return ok(ProjectRead.from_model(project))
