"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.party_planner.api.dependencies.db import DBSession
from src.party_planner.repositories import ProjectRepository, UserRepository


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
