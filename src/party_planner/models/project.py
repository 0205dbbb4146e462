"""Project model - a user's party plan.

Guests and selected catalog items are embedded as JSON lists on the project
row, so every mutation of a project is a single-row write. Assign new lists
rather than mutating in place: SQLAlchemy does not track in-place changes to
JSON columns.
"""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid7

from sqlalchemy import JSON, DateTime
from sqlmodel import Field, SQLModel

from src.party_planner.models.base import utc_now

DEFAULT_DUE_DATE = "YY-MM-DD"
PROJECT_NAME_MIN_LENGTH = 5
PROJECT_NAME_MAX_LENGTH = 30


class Project(SQLModel, table=True):
    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    name: str = Field(max_length=PROJECT_NAME_MAX_LENGTH)
    owner_id: UUID = Field(foreign_key="users.id", index=True)
    due_date: str = Field(default=DEFAULT_DUE_DATE, max_length=100)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime, index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)

    # [{"id": "<uuid>", "guest_name": "...", "phone": "..."}]
    guest_list: list[dict[str, Any]] = Field(default_factory=list, sa_type=JSON)

    # Denormalized catalog item copies, None until the first selection
    themes: list[dict[str, Any]] | None = Field(default=None, sa_type=JSON)
    decorations: list[dict[str, Any]] | None = Field(default=None, sa_type=JSON)
    food: list[dict[str, Any]] | None = Field(default=None, sa_type=JSON)
    drinks: list[dict[str, Any]] | None = Field(default=None, sa_type=JSON)
    activities: list[dict[str, Any]] | None = Field(default=None, sa_type=JSON)
