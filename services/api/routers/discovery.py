"""
Traveler discovery.

Endpoints:
  POST /travelers/search  -- findTravelers, body {user_id, location?, interests?, limit?}

POST rather than GET because the interests filter is a list.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from services.api.companion import discovery as discovery_core
from services.api.companion.schemas import FindTravelersInput, UserOut
from services.api.routers._deps import Envelope, envelope, get_db

router = APIRouter(prefix="/travelers", tags=["discovery"])


@router.post("/search", response_model=Envelope, name="findTravelers")
async def find_travelers(
    body: FindTravelersInput,
    request: Request,
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    travelers = await discovery_core.find_travelers(session, body)
    return envelope(
        request,
        [UserOut.model_validate(u).model_dump(mode="json") for u in travelers],
    )
