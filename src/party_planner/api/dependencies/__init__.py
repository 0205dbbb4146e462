"""FastAPI dependency injection definitions."""

from src.party_planner.api.dependencies.auth import (
    CurrentUser,
    PathUser,
    extract_token,
    get_current_user,
    get_path_user,
)
from src.party_planner.api.dependencies.db import DBSession, get_database, get_db_session
from src.party_planner.api.dependencies.repositories import (
    ProjectRepo,
    UserRepo,
    get_project_repository,
    get_user_repository,
)
from src.party_planner.api.dependencies.services import (
    AuthServiceDep,
    CatalogServiceDep,
    GuestServiceDep,
    ProjectServiceDep,
    SelectionServiceDep,
    UserServiceDep,
    get_auth_service,
    get_catalog_service,
    get_guest_service,
    get_project_service,
    get_selection_service,
    get_user_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_database",
    "get_db_session",
    # Auth
    "CurrentUser",
    "PathUser",
    "extract_token",
    "get_current_user",
    "get_path_user",
    # Repositories
    "ProjectRepo",
    "UserRepo",
    "get_project_repository",
    "get_user_repository",
    # Services
    "AuthServiceDep",
    "CatalogServiceDep",
    "GuestServiceDep",
    "ProjectServiceDep",
    "SelectionServiceDep",
    "UserServiceDep",
    "get_auth_service",
    "get_catalog_service",
    "get_guest_service",
    "get_project_service",
    "get_selection_service",
    "get_user_service",
]
