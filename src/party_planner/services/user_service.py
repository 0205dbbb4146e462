"""Account management - delete account, change password."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.party_planner.core.logging import get_logger
from src.party_planner.core.security import hash_password
from src.party_planner.models import User
from src.party_planner.models.base import utc_now
from src.party_planner.repositories import ProjectRepository, UserRepository
from src.party_planner.services.auth_service import validate_password_length

logger = get_logger(__name__)


class UserService:
    def __init__(
        self,
        user_repo: UserRepository,
        project_repo: ProjectRepository,
        session: AsyncSession,
    ):
        self.user_repo = user_repo
        self.project_repo = project_repo
        self.session = session

    async def change_password(self, user: User, password: str) -> User:
        """Replace the password hash. The access token is left unchanged."""
        validate_password_length(password)
        user.hashed_password = hash_password(password)
        user.updated_at = utc_now()
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info("Password changed", user_id=str(user.id))
        return user

    async def delete_account(self, user: User) -> None:
        """Delete the user together with every project they own."""
        user_id = user.id
        try:
            await self.project_repo.delete_by_owner(user_id)
            await self.user_repo.delete(user)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info("Account deleted", user_id=str(user_id))
