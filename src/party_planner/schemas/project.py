"""Project, guest and selection schemas for API request/response.

Field aliases keep the wire names the mobile client already uses
(``_id``, ``guestName``, ``guestList``, ``userProject``...).
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.party_planner.models import CatalogCollection, Project
from src.party_planner.models.project import PROJECT_NAME_MAX_LENGTH, PROJECT_NAME_MIN_LENGTH


def validate_project_name(v: str) -> str:
    """Trim and enforce the 5-30 character rule. Never truncates."""
    v = v.strip()
    if not v:
        raise ValueError("Project name is required")
    if len(v) < PROJECT_NAME_MIN_LENGTH:
        raise ValueError(
            f"Project name must be at least {PROJECT_NAME_MIN_LENGTH} characters"
        )
    if len(v) > PROJECT_NAME_MAX_LENGTH:
        raise ValueError(
            f"Project name must be at most {PROJECT_NAME_MAX_LENGTH} characters"
        )
    return v


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    name: str
    due_date: str | None = Field(default=None, max_length=100)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return validate_project_name(v)

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v


class ProjectUpdate(BaseModel):
    """Partial update: only fields present in the body are changed."""

    name: str | None = None
    due_date: str | None = Field(default=None, max_length=100)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is not None:
            v = validate_project_name(v)
        return v

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError("Due date cannot be empty")
        return v


class GuestCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    guest_name: str = Field(alias="guestName", max_length=100)
    phone: str = Field(max_length=30)

    @field_validator("guest_name")
    @classmethod
    def validate_guest_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Guest name cannot be empty or whitespace only")
        return v

    @field_validator("phone", mode="before")
    @classmethod
    def coerce_phone(cls, v: Any) -> Any:
        # The client sends phone numbers as JSON numbers
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Phone number cannot be empty")
        return v


class GuestRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    guest_name: str = Field(alias="guestName")
    phone: str


class SelectionUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_completed: bool = Field(default=True, alias="isCompleted")


class SelectionRead(BaseModel):
    """A catalog item copied onto a project."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    name: str
    image: str | None = None
    type: list[str] = []
    is_completed: bool = Field(default=False, alias="isCompleted")


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    name: str
    owner_id: UUID = Field(alias="userProject")
    due_date: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
    guest_list: list[GuestRead] = Field(default=[], alias="guestList")
    themes: list[SelectionRead] | None = None
    decorations: list[SelectionRead] | None = None
    food: list[SelectionRead] | None = None
    drinks: list[SelectionRead] | None = None
    activities: list[SelectionRead] | None = None

    @classmethod
    def from_model(cls, project: Project) -> "ProjectRead":
        selections = {
            collection.value: (
                None
                if getattr(project, collection.value) is None
                else [SelectionRead(**item) for item in getattr(project, collection.value)]
            )
            for collection in CatalogCollection
        }
        return cls(
            id=project.id,
            name=project.name,
            owner_id=project.owner_id,
            due_date=project.due_date,
            created_at=project.created_at,
            updated_at=project.updated_at,
            guest_list=[GuestRead(**guest) for guest in project.guest_list],
            **selections,
        )
