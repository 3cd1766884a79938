"""
Travel itinerary legs owned by a user.

Listing is newest-departure-first with id as the tie-break so a paginated
window is always a slice of the full ordering.
"""

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from services.api.companion.errors import NotFound
from services.api.companion.schemas import (
    CreateTravelPlanInput,
    GetUserTravelPlansInput,
    UpdateTravelPlanInput,
)
from services.api.companion.store import paginate, utcnow, write_guard
from services.api.db.models import TravelPlan, new_id

logger = logging.getLogger(__name__)


async def create_travel_plan(session: AsyncSession, data: CreateTravelPlanInput) -> TravelPlan:
    """Insert a plan for ``data.user_id``; an unknown owner raises ConstraintViolation."""
    now = utcnow()
    stmt = (
        insert(TravelPlan)
        .values(id=new_id(), **data.model_dump(), created_at=now, updated_at=now)
        .returning(TravelPlan)
    )
    async with write_guard(session, "create_travel_plan"):
        result = await session.execute(stmt)
        plan = result.scalars().one()

    logger.info("travel_plan_created plan=%s user=%s mode=%s", plan.id, plan.user_id, plan.mode)
    return plan


async def get_user_travel_plans(
    session: AsyncSession, query: GetUserTravelPlansInput
) -> list[TravelPlan]:
    stmt = (
        select(TravelPlan)
        .where(TravelPlan.user_id == query.user_id)
        .order_by(TravelPlan.departure_time.desc(), TravelPlan.id)
    )
    stmt = paginate(stmt, query.limit, query.offset)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def update_travel_plan(
    session: AsyncSession, plan_id: str, changes: UpdateTravelPlanInput
) -> TravelPlan:
    """
    Partial update: fields absent from the request are left untouched.

    Raises NotFound when no plan has ``plan_id``.
    """
    values = changes.model_dump(exclude_unset=True)
    values["updated_at"] = utcnow()

    stmt = (
        update(TravelPlan)
        .where(TravelPlan.id == plan_id)
        .values(**values)
        .returning(TravelPlan)
        .execution_options(populate_existing=True)
    )
    async with write_guard(session, "update_travel_plan"):
        result = await session.execute(stmt)
        plan = result.scalars().first()

    if plan is None:
        logger.warning("update_travel_plan: plan %s not found", plan_id)
        raise NotFound(f"Travel plan with id {plan_id} not found.")

    logger.info("travel_plan_updated plan=%s fields=%s", plan_id, sorted(values))
    return plan


async def delete_travel_plan(session: AsyncSession, plan_id: str) -> None:
    """Idempotent. No ownership check: any caller holding the id may delete."""
    result = await session.execute(delete(TravelPlan).where(TravelPlan.id == plan_id))
    await session.commit()
    logger.info("travel_plan_deleted plan=%s rows=%d", plan_id, result.rowcount)
