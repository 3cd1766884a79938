"""
Shared statement helpers for the companion operations.

- ``paginate``: apply optional LIMIT/OFFSET after ordering.
- ``write_guard``: commit a write, translating IntegrityError into
  ConstraintViolation after rolling the session back.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from services.api.companion.errors import ConstraintViolation

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def paginate(stmt: Select, limit: Optional[int] = None, offset: Optional[int] = None) -> Select:
    """Either bound may be absent; an absent limit leaves the result unbounded."""
    if limit is not None:
        stmt = stmt.limit(limit)
    if offset is not None:
        stmt = stmt.offset(offset)
    return stmt


@asynccontextmanager
async def write_guard(session: AsyncSession, action: str):
    """
    Wrap a single write statement and its commit.

    The caller executes the statement inside the block; the commit happens on
    exit. Duplicate emails and dangling foreign keys come back from the store
    as IntegrityError (at execute on Postgres, at commit on some backends),
    so both are covered.
    """
    try:
        yield
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        logger.warning("%s rejected by store: %s", action, exc.orig)
        raise ConstraintViolation(f"{action} violates a store constraint.") from exc
