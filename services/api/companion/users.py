"""
User profile operations: create, fetch by id, partial update.
"""

import logging
from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from services.api.companion.errors import NotFound
from services.api.companion.schemas import CreateUserInput, UpdateUserInput
from services.api.companion.store import utcnow, write_guard
from services.api.db.models import User, new_id

logger = logging.getLogger(__name__)


async def create_user(session: AsyncSession, data: CreateUserInput) -> User:
    """
    Insert a user. Omitted optionals default to NULL, interests to [] and
    is_discoverable to False. A duplicate email raises ConstraintViolation.
    """
    now = utcnow()
    stmt = (
        insert(User)
        .values(
            id=new_id(),
            email=str(data.email),
            name=data.name,
            image=data.image,
            bio=data.bio,
            location=data.location,
            interests=list(data.interests),
            is_discoverable=data.is_discoverable,
            created_at=now,
            updated_at=now,
        )
        .returning(User)
    )
    async with write_guard(session, "create_user"):
        result = await session.execute(stmt)
        user = result.scalars().one()

    logger.info("user_created user=%s discoverable=%s", user.id, user.is_discoverable)
    return user


async def get_user(session: AsyncSession, user_id: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.id == user_id))
    return result.scalars().first()


async def update_user(session: AsyncSession, user_id: str, changes: UpdateUserInput) -> User:
    """
    Apply only the fields present in ``changes``; updated_at is always refreshed.

    Raises NotFound when no user has ``user_id``.
    """
    values = changes.model_dump(exclude_unset=True)
    values["updated_at"] = utcnow()

    stmt = (
        update(User)
        .where(User.id == user_id)
        .values(**values)
        .returning(User)
        .execution_options(populate_existing=True)
    )
    async with write_guard(session, "update_user"):
        result = await session.execute(stmt)
        user = result.scalars().first()

    if user is None:
        logger.warning("update_user: user %s not found", user_id)
        raise NotFound(f"User with id {user_id} not found.")

    logger.info("user_updated user=%s fields=%s", user_id, sorted(values))
    return user
