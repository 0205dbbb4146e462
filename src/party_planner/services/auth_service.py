"""Authentication service - sign-up, sign-in and bearer token lookup."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.party_planner.core.config import get_settings
from src.party_planner.core.exceptions import Conflict, ValidationFailed
from src.party_planner.core.logging import get_logger
from src.party_planner.core.security import (
    DUMMY_PASSWORD_HASH,
    generate_access_token,
    hash_password,
    tokens_match,
    verify_password,
)
from src.party_planner.models import User
from src.party_planner.repositories import UserRepository

logger = get_logger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def validate_password_length(password: str) -> None:
    """Reject short passwords before any hashing work is done."""
    min_length = get_settings().min_password_length
    if len(password) < min_length:
        raise ValidationFailed(f"Password must be minimum {min_length} characters")


class AuthService:
    """Issues and checks the opaque per-user access token."""

    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    async def sign_up(self, email: str, password: str) -> User:
        """Create an account and its access token.

        Raises ValidationFailed for a short password and Conflict when the
        email is already registered.
        """
        validate_password_length(password)
        email = normalize_email(email)

        if await self.user_repo.exists_by_email(email):
            raise Conflict("User already exists")

        user = User(
            email=email,
            hashed_password=hash_password(password),
            access_token=generate_access_token(),
        )
        self.user_repo.add(user)

        try:
            await self.session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent sign-up for the same email
            await self.session.rollback()
            raise Conflict("User already exists") from e
        except Exception:
            await self.session.rollback()
            raise

        await self.session.refresh(user)
        logger.info("User signed up", user_id=str(user.id))
        return user

    async def sign_in(self, email: str, password: str) -> User | None:
        """Return the user when email and password match, otherwise None.

        The password is always verified, against a dummy hash for unknown
        emails, so response timing does not reveal whether an account exists.
        """
        user = await self.user_repo.get_by_email(normalize_email(email))

        password_hash = user.hashed_password if user else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if user is None or not password_valid:
            return None
        return user

    async def authenticate_token(self, token: str) -> User | None:
        """Resolve a bearer token to its user."""
        if not token:
            return None
        user = await self.user_repo.get_by_access_token(token)
        if user is None or not tokens_match(token, user.access_token):
            return None
        return user
