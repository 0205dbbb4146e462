from src.party_planner.services.auth_service import AuthService
from src.party_planner.services.catalog_service import CatalogService
from src.party_planner.services.guest_service import GuestService
from src.party_planner.services.project_service import ProjectService
from src.party_planner.services.selection_service import SelectionService
from src.party_planner.services.user_service import UserService

__all__ = [
    "AuthService",
    "CatalogService",
    "GuestService",
    "ProjectService",
    "SelectionService",
    "UserService",
]
