"""Repository layer - data access abstraction."""

from src.party_planner.repositories.base import BaseRepository
from src.party_planner.repositories.catalog import CatalogRepository
from src.party_planner.repositories.project import ProjectRepository
from src.party_planner.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "CatalogRepository",
    "ProjectRepository",
    "UserRepository",
]
