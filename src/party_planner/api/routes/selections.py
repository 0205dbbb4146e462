"""Catalog items selected onto a project, one router per collection.

Collections are literal path segments so ``.../{project_id}/delete/{guest_id}``
never collides with a selection route.
"""

from uuid import UUID

from fastapi import APIRouter

from src.party_planner.api.dependencies import PathUser, SelectionServiceDep
from src.party_planner.models import CatalogCollection
from src.party_planner.schemas import Envelope, ProjectRead, SelectionUpdate, ok

NOT_FOUND_RESPONSES = {404: {"description": "Project or item not found"}}


def create_selection_router(collection: CatalogCollection) -> APIRouter:
    router = APIRouter(
        prefix=f"/{{user_id}}/project-board/projects/{{project_id}}/{collection.value}",
        tags=["selections"],
    )

    @router.post(
        "/{item_id}",
        response_model=Envelope[ProjectRead],
        name=f"select_{collection.value}_item",
        responses=NOT_FOUND_RESPONSES,
    )
    async def add_item(
        project_id: UUID, item_id: UUID, user: PathUser, service: SelectionServiceDep
    ) -> Envelope[ProjectRead]:
        """Copy the catalog item onto the project. Selecting twice is a no-op."""
        project = await service.add_item(project_id, user.id, collection, item_id)
        return ok(ProjectRead.from_model(project))

    @router.patch(
        "/{item_id}",
        response_model=Envelope[ProjectRead],
        name=f"update_{collection.value}_item",
        responses=NOT_FOUND_RESPONSES,
    )
    async def set_completed(
        project_id: UUID,
        item_id: UUID,
        data: SelectionUpdate,
        user: PathUser,
        service: SelectionServiceDep,
    ) -> Envelope[ProjectRead]:
        project = await service.set_completed(
            project_id, user.id, collection, item_id, data.is_completed
        )
        return ok(ProjectRead.from_model(project))

    @router.delete(
        "/{item_id}",
        response_model=Envelope[ProjectRead],
        name=f"remove_{collection.value}_item",
        responses=NOT_FOUND_RESPONSES,
    )
    async def remove_item(
        project_id: UUID, item_id: UUID, user: PathUser, service: SelectionServiceDep
    ) -> Envelope[ProjectRead]:
        project = await service.remove_item(project_id, user.id, collection, item_id)
        return ok(ProjectRead.from_model(project))

    return router


routers = [create_selection_router(collection) for collection in CatalogCollection]
