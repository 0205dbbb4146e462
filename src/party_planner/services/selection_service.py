"""Catalog items selected onto a project.

Selections are copies, not references: later catalog reseeds leave existing
projects untouched.
"""

from typing import Any
from uuid import UUID

from src.party_planner.core.exceptions import NotFound
from src.party_planner.core.logging import get_logger
from src.party_planner.models import CatalogCollection, Project
from src.party_planner.models.base import utc_now
from src.party_planner.services.catalog_service import CatalogService
from src.party_planner.services.project_service import ProjectService

logger = get_logger(__name__)


def _item_not_found() -> NotFound:
    return NotFound("Item not found", error_code="item_not_found")


class SelectionService:
    def __init__(self, project_service: ProjectService, catalog_service: CatalogService):
        self.project_service = project_service
        self.catalog_service = catalog_service

    @staticmethod
    def _selected(project: Project, collection: CatalogCollection) -> list[dict[str, Any]]:
        return list(getattr(project, collection.value) or [])

    async def _save(
        self, project: Project, collection: CatalogCollection, items: list[dict[str, Any]]
    ) -> None:
        setattr(project, collection.value, items)
        project.updated_at = utc_now()
        await self.project_service.commit()

    async def add_item(
        self,
        project_id: UUID,
        owner_id: UUID,
        collection: CatalogCollection,
        item_id: UUID,
    ) -> Project:
        """Copy a catalog item onto the project. Selecting twice is a no-op."""
        project = await self.project_service.get_owned(project_id, owner_id)
        try:
            item = await self.catalog_service.get_item(collection, item_id)
        except NotFound as e:
            raise _item_not_found() from e

        selected = self._selected(project, collection)
        if any(entry.get("id") == str(item_id) for entry in selected):
            return project

        selected.append(
            {
                "id": str(item.id),
                "name": item.name,
                "image": item.image,
                "type": list(item.type or []),
                "is_completed": False,
            }
        )
        await self._save(project, collection, selected)
        logger.info(
            "Item selected",
            project_id=str(project_id),
            collection=collection.value,
            item_id=str(item_id),
        )
        return project

    async def set_completed(
        self,
        project_id: UUID,
        owner_id: UUID,
        collection: CatalogCollection,
        item_id: UUID,
        is_completed: bool,
    ) -> Project:
        project = await self.project_service.get_owned(project_id, owner_id)
        selected = self._selected(project, collection)

        for index, entry in enumerate(selected):
            if entry.get("id") == str(item_id):
                selected[index] = {**entry, "is_completed": is_completed}
                break
        else:
            raise _item_not_found()

        await self._save(project, collection, selected)
        return project

    async def remove_item(
        self,
        project_id: UUID,
        owner_id: UUID,
        collection: CatalogCollection,
        item_id: UUID,
    ) -> Project:
        project = await self.project_service.get_owned(project_id, owner_id)
        selected = self._selected(project, collection)

        remaining = [entry for entry in selected if entry.get("id") != str(item_id)]
        if len(remaining) == len(selected):
            raise _item_not_found()

        await self._save(project, collection, remaining)
        logger.info(
            "Item removed",
            project_id=str(project_id),
            collection=collection.value,
            item_id=str(item_id),
        )
        return project
