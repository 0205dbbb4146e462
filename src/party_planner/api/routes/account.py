"""Account administration for the signed-in user."""

from fastapi import APIRouter

from src.party_planner.api.dependencies import PathUser, UserServiceDep
from src.party_planner.schemas import Envelope, PasswordChangeRequest, ok

router = APIRouter(prefix="/{user_id}/admin", tags=["account"])


@router.delete(
    "/delete",
    response_model=Envelope[str],
    responses={404: {"description": "User not found"}},
)
async def delete_account(user: PathUser, service: UserServiceDep) -> Envelope[str]:
    """Delete the account and every project it owns."""
    await service.delete_account(user)
    return ok("Account removed")


@router.patch(
    "/change",
    response_model=Envelope[str],
    responses={
        400: {"description": "Password too short"},
        404: {"description": "User not found"},
    },
)
async def change_password(
    data: PasswordChangeRequest, user: PathUser, service: UserServiceDep
) -> Envelope[str]:
    """Set a new password. The access token stays the same."""
    await service.change_password(user, data.password)
    return ok("Password changed")
