"""Authentication dependencies.

The mobile client sends the raw token in the ``Authorization`` header;
``Bearer <token>`` is accepted too.
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header
from sqlalchemy.exc import SQLAlchemyError

from src.party_planner.api.dependencies.services import AuthServiceDep
from src.party_planner.core.exceptions import AuthenticationFailed, NotFound, StoreUnavailable
from src.party_planner.core.logging import bind_user_context, get_logger
from src.party_planner.models import User

logger = get_logger(__name__)


def extract_token(authorization: str | None) -> str | None:
    """Pull the token out of the header value, with or without a Bearer prefix."""
    if not authorization:
        return None
    scheme, _, credentials = authorization.strip().partition(" ")
    if credentials and scheme.lower() == "bearer":
        return credentials.strip() or None
    return authorization.strip() or None


async def get_current_user(
    service: AuthServiceDep,
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Resolve the Authorization header to a user or raise AuthenticationFailed."""
    token = extract_token(authorization)
    if token is None:
        raise AuthenticationFailed()

    try:
        user = await service.authenticate_token(token)
    except SQLAlchemyError as e:
        logger.exception("Token lookup failed", exc_info=e)
        raise StoreUnavailable() from e

    if user is None:
        raise AuthenticationFailed()

    bind_user_context(user.id, user.email)
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


async def get_path_user(user_id: UUID, current_user: CurrentUser) -> User:
    """Require the ``{user_id}`` path segment to name the authenticated user.

    A mismatch looks exactly like a missing resource so other accounts are
    never acknowledged.
    """
    if user_id != current_user.id:
        raise NotFound("Not found", error_code="user_not_found")
    return current_user


PathUser = Annotated[User, Depends(get_path_user)]
