"""Catalog models - themes, decorations, food, drinks and activities.

Each collection is its own table. Items are immutable through the API and
only change when the catalog is reseeded.
"""

from uuid import UUID, uuid7

from sqlalchemy import JSON
from sqlmodel import Field, SQLModel

from src.party_planner.models.enums import CatalogCollection


class CatalogItemBase(SQLModel):
    """Columns shared by every catalog collection."""

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    name: str = Field(max_length=200)
    image: str | None = Field(default=None, max_length=500)
    # Free-form tags, e.g. ["kids", "outdoor"]
    type: list[str] = Field(default_factory=list, sa_type=JSON)


class ThemedCatalogItemBase(CatalogItemBase):
    """Catalog item that can be associated with themes by name."""

    belongs_to_themes: list[str] = Field(default_factory=list, sa_type=JSON)


class Theme(CatalogItemBase, table=True):
    __tablename__ = "themes"


class Decoration(ThemedCatalogItemBase, table=True):
    __tablename__ = "decorations"


class Food(ThemedCatalogItemBase, table=True):
    __tablename__ = "food"


class Drink(ThemedCatalogItemBase, table=True):
    __tablename__ = "drinks"


class Activity(ThemedCatalogItemBase, table=True):
    __tablename__ = "activities"


CATALOG_MODELS: dict[CatalogCollection, type[CatalogItemBase]] = {
    CatalogCollection.THEMES: Theme,
    CatalogCollection.DECORATIONS: Decoration,
    CatalogCollection.FOOD: Food,
    CatalogCollection.DRINKS: Drink,
    CatalogCollection.ACTIVITIES: Activity,
}
