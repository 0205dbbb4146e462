from src.party_planner.schemas.auth import (
    AuthResponse,
    PasswordChangeRequest,
    SignInRequest,
    SignUpRequest,
)
from src.party_planner.schemas.catalog import CatalogItemRead
from src.party_planner.schemas.envelope import Envelope, ok
from src.party_planner.schemas.project import (
    GuestCreate,
    GuestRead,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
    SelectionRead,
    SelectionUpdate,
)

__all__ = [
    # Envelope
    "Envelope",
    "ok",
    # Auth
    "AuthResponse",
    "PasswordChangeRequest",
    "SignInRequest",
    "SignUpRequest",
    # Catalog
    "CatalogItemRead",
    # Projects
    "GuestCreate",
    "GuestRead",
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    "SelectionRead",
    "SelectionUpdate",
]
