from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.party_planner.models import CatalogItemBase


class CatalogItemRead(BaseModel):
    """A theme, decoration, food, drink or activity."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    name: str
    image: str | None = None
    type: list[str] = []
    # Absent for themes
    belongs_to_themes: list[str] | None = None

    @classmethod
    def from_model(cls, item: CatalogItemBase) -> "CatalogItemRead":
        return cls(
            id=item.id,
            name=item.name,
            image=item.image,
            type=list(item.type or []),
            belongs_to_themes=getattr(item, "belongs_to_themes", None),
        )
