"""
Travel plans (itinerary legs).

Endpoints:
  POST   /travel-plans                    -- createTravelPlan
  GET    /users/{user_id}/travel-plans    -- getUserTravelPlans (?limit=&offset=)
  PATCH  /travel-plans/{plan_id}          -- updateTravelPlan (partial; 404 when absent)
  DELETE /travel-plans/{plan_id}          -- deleteTravelPlan (idempotent)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from services.api.companion import travel_plans as plans_core
from services.api.companion.schemas import (
    CreateTravelPlanInput,
    GetUserTravelPlansInput,
    TravelPlanOut,
    UpdateTravelPlanInput,
)
from services.api.routers._deps import Envelope, envelope, get_db

router = APIRouter(tags=["travel-plans"])


def _plan_payload(plan) -> dict:
    return TravelPlanOut.model_validate(plan).model_dump(mode="json")


@router.post("/travel-plans", response_model=Envelope, status_code=201, name="createTravelPlan")
async def create_travel_plan(
    body: CreateTravelPlanInput,
    request: Request,
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    plan = await plans_core.create_travel_plan(session, body)
    return envelope(request, _plan_payload(plan))


@router.get("/users/{user_id}/travel-plans", response_model=Envelope, name="getUserTravelPlans")
async def get_user_travel_plans(
    user_id: str,
    request: Request,
    limit: Optional[int] = Query(None, gt=0),
    offset: Optional[int] = Query(None, ge=0),
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    query = GetUserTravelPlansInput(user_id=user_id, limit=limit, offset=offset)
    plans = await plans_core.get_user_travel_plans(session, query)
    return envelope(request, [_plan_payload(p) for p in plans])


@router.patch("/travel-plans/{plan_id}", response_model=Envelope, name="updateTravelPlan")
async def update_travel_plan(
    plan_id: str,
    body: UpdateTravelPlanInput,
    request: Request,
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    plan = await plans_core.update_travel_plan(session, plan_id, body)
    return envelope(request, _plan_payload(plan))


@router.delete("/travel-plans/{plan_id}", response_model=Envelope, name="deleteTravelPlan")
async def delete_travel_plan(
    plan_id: str,
    request: Request,
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    await plans_core.delete_travel_plan(session, plan_id)
    return envelope(request)
