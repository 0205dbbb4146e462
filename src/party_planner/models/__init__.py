"""Model exports.

Import from here: `from src.party_planner.models import User, Project`
"""

from src.party_planner.models.catalog import (
    CATALOG_MODELS,
    Activity,
    CatalogItemBase,
    Decoration,
    Drink,
    Food,
    Theme,
    ThemedCatalogItemBase,
)
from src.party_planner.models.enums import CatalogCollection
from src.party_planner.models.project import DEFAULT_DUE_DATE, Project
from src.party_planner.models.user import User

__all__ = [
    # Enums
    "CatalogCollection",
    # Catalog
    "CATALOG_MODELS",
    "Activity",
    "CatalogItemBase",
    "Decoration",
    "Drink",
    "Food",
    "Theme",
    "ThemedCatalogItemBase",
    # Projects
    "DEFAULT_DUE_DATE",
    "Project",
    # Users
    "User",
]
