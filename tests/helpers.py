"""Test helper functions for common data creation patterns."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.party_planner.models import Project, User
from tests.factories import ProjectFactory, UserFactory


async def create_user(session: AsyncSession, **user_kwargs) -> User:
    """Persist a user built by UserFactory and return it."""
    user = UserFactory.build(**user_kwargs)
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


async def create_project(session: AsyncSession, owner: User, **project_kwargs) -> Project:
    """Persist a project owned by ``owner``."""
    project = ProjectFactory.build(owner_id=owner.id, **project_kwargs)
    session.add(project)
    await session.commit()
    await session.refresh(project)
    return project


def auth_headers(user: User) -> dict[str, str]:
    """Authorization header as the mobile client sends it (raw token, no scheme)."""
    return {"Authorization": user.access_token}


def board_url(user: User, path: str = "") -> str:
    """URL under the user's project board, e.g. ``board_url(user, "/addProject")``."""
    return f"/{user.id}/project-board/projects{path}"
