"""
Direct messaging.

Endpoints:
  POST /messages                       -- createMessage
  GET  /users/{user_id}/messages       -- getMessages (sent or received; ?limit=&offset=)
  POST /messages/{message_id}/read     -- markMessageAsRead, body {user_id}

markMessageAsRead always answers 200 with data null: when the acting user
is not the recipient (or the message does not exist) nothing changes, and
the response does not reveal which case applied.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from services.api.companion import messages as messages_core
from services.api.companion.schemas import (
    CreateMessageInput,
    GetMessagesInput,
    MarkMessageAsReadInput,
    MessageOut,
)
from services.api.routers._deps import Envelope, envelope, get_db

router = APIRouter(tags=["messages"])


class MarkReadBody(BaseModel):
    user_id: str


def _message_payload(message) -> dict:
    return MessageOut.model_validate(message).model_dump(mode="json")


@router.post("/messages", response_model=Envelope, status_code=201, name="createMessage")
async def create_message(
    body: CreateMessageInput,
    request: Request,
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    message = await messages_core.create_message(session, body)
    return envelope(request, _message_payload(message))


@router.get("/users/{user_id}/messages", response_model=Envelope, name="getMessages")
async def get_messages(
    user_id: str,
    request: Request,
    limit: Optional[int] = Query(None, gt=0),
    offset: Optional[int] = Query(None, ge=0),
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    query = GetMessagesInput(user_id=user_id, limit=limit, offset=offset)
    messages = await messages_core.get_messages(session, query)
    return envelope(request, [_message_payload(m) for m in messages])


@router.post("/messages/{message_id}/read", response_model=Envelope, name="markMessageAsRead")
async def mark_message_as_read(
    message_id: str,
    body: MarkReadBody,
    request: Request,
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    await messages_core.mark_message_as_read(
        session, MarkMessageAsReadInput(message_id=message_id, user_id=body.user_id)
    )
    return envelope(request)
