from fastapi import APIRouter

from src.party_planner.api.dependencies import PathUser
from src.party_planner.schemas import Envelope, ok

router = APIRouter(prefix="/{user_id}/project-board", tags=["projects"])


@router.get("", response_model=Envelope[str])
async def project_board(user: PathUser) -> Envelope[str]:
    return ok("Welcome back")
