"""Repository for User entity."""

from sqlmodel import select

from src.party_planner.models import User
from src.party_planner.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Get user by (already normalized) email address."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        user = await self.get_by_email(email)
        return user is not None

    async def get_by_access_token(self, token: str) -> User | None:
        result = await self.session.execute(select(User).where(User.access_token == token))
        return result.scalar_one_or_none()
