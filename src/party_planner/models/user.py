"""User model - account credentials and the opaque bearer token."""

from datetime import datetime
from uuid import UUID, uuid7

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from src.party_planner.models.base import utc_now


class User(SQLModel, table=True):
    """Registered account.

    ``access_token`` is generated once at sign-up and is the only session
    credential: it is never rotated and is valid until the account is deleted.
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    hashed_password: str = Field(max_length=255)
    access_token: str = Field(max_length=512, unique=True, index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
