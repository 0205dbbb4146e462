"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.party_planner.api.dependencies.db import DBSession
from src.party_planner.api.dependencies.repositories import ProjectRepo, UserRepo
from src.party_planner.services import (
    AuthService,
    CatalogService,
    GuestService,
    ProjectService,
    SelectionService,
    UserService,
)


def get_auth_service(user_repo: UserRepo, session: DBSession) -> AuthService:
    return AuthService(user_repo, session)


def get_user_service(
    user_repo: UserRepo, project_repo: ProjectRepo, session: DBSession
) -> UserService:
    return UserService(user_repo, project_repo, session)


def get_catalog_service(session: DBSession) -> CatalogService:
    return CatalogService(session)


def get_project_service(project_repo: ProjectRepo, session: DBSession) -> ProjectService:
    return ProjectService(project_repo, session)


def get_guest_service(
    project_service: Annotated[ProjectService, Depends(get_project_service)],
) -> GuestService:
    return GuestService(project_service)


def get_selection_service(
    project_service: Annotated[ProjectService, Depends(get_project_service)],
    catalog_service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> SelectionService:
    return SelectionService(project_service, catalog_service)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
GuestServiceDep = Annotated[GuestService, Depends(get_guest_service)]
SelectionServiceDep = Annotated[SelectionService, Depends(get_selection_service)]
