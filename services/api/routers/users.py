"""
User profiles.

Endpoints:
  POST  /users             -- createUser
  GET   /users/{user_id}   -- getUser (data is null when the user is absent)
  PATCH /users/{user_id}   -- updateUser (partial; 404 when the user is absent)
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from services.api.companion import users as users_core
from services.api.companion.schemas import CreateUserInput, UpdateUserInput, UserOut
from services.api.routers._deps import Envelope, envelope, get_db

router = APIRouter(prefix="/users", tags=["users"])


def _user_payload(user) -> dict:
    return UserOut.model_validate(user).model_dump(mode="json")


@router.post("", response_model=Envelope, status_code=201, name="createUser")
async def create_user(
    body: CreateUserInput,
    request: Request,
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    user = await users_core.create_user(session, body)
    return envelope(request, _user_payload(user))


@router.get("/{user_id}", response_model=Envelope, name="getUser")
async def get_user(
    user_id: str,
    request: Request,
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    user = await users_core.get_user(session, user_id)
    return envelope(request, _user_payload(user) if user is not None else None)


@router.patch("/{user_id}", response_model=Envelope, name="updateUser")
async def update_user(
    user_id: str,
    body: UpdateUserInput,
    request: Request,
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    user = await users_core.update_user(session, user_id, body)
    return envelope(request, _user_payload(user))
