"""
Traveler discovery: who can find whom.

A candidate is visible only when it is discoverable and is not the requester.
That gate is part of every discovery query; the optional filters narrow it
further and are ANDed together:

  - location:  exact match on User.location
  - interests: the candidate shares at least one interest with the list
  - limit:     caps the number of results

Results are ordered by id so repeated searches return the same sequence.
This is a filter, not a ranking: there is no scoring of matches.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from services.api.companion.schemas import FindTravelersInput
from services.api.db.expressions import json_array_overlaps
from services.api.db.models import User

logger = logging.getLogger(__name__)


def build_discovery_query(query: FindTravelersInput):
    conditions = [
        User.id != query.user_id,
        User.is_discoverable.is_(True),
    ]
    if query.location:
        conditions.append(User.location == query.location)
    if query.interests:
        conditions.append(json_array_overlaps(User.interests, query.interests))

    stmt = select(User).where(*conditions).order_by(User.id)
    if query.limit is not None:
        stmt = stmt.limit(query.limit)
    return stmt


async def find_travelers(session: AsyncSession, query: FindTravelersInput) -> list[User]:
    result = await session.execute(build_discovery_query(query))
    travelers = list(result.scalars().all())
    logger.info(
        "find_travelers requester=%s location=%s interests=%d matches=%d",
        query.user_id,
        query.location,
        len(query.interests or []),
        len(travelers),
    )
    return travelers
