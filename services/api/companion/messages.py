"""
Direct messages between users.

Read state:
  - unread -> read, triggered only by the recipient.
  - read is terminal; nothing flips a message back to unread.
  - A sender, a stranger, or an unknown message id makes mark-as-read a
    silent no-op: no error, no state change.

Creating a message has no access gate beyond both user ids existing.
"""

import logging

from sqlalchemy import insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from services.api.companion.schemas import (
    CreateMessageInput,
    GetMessagesInput,
    MarkMessageAsReadInput,
)
from services.api.companion.store import paginate, utcnow, write_guard
from services.api.db.models import Message, new_id

logger = logging.getLogger(__name__)


async def create_message(session: AsyncSession, data: CreateMessageInput) -> Message:
    """Insert an unread message; an unknown sender or recipient raises ConstraintViolation."""
    stmt = (
        insert(Message)
        .values(
            id=new_id(),
            sender_id=data.sender_id,
            recipient_id=data.recipient_id,
            content=data.content,
            is_read=False,
            created_at=utcnow(),
        )
        .returning(Message)
    )
    async with write_guard(session, "create_message"):
        result = await session.execute(stmt)
        message = result.scalars().one()

    logger.info(
        "message_created message=%s from=%s to=%s",
        message.id,
        message.sender_id,
        message.recipient_id,
    )
    return message


async def get_messages(session: AsyncSession, query: GetMessagesInput) -> list[Message]:
    """Messages the user sent or received, newest first."""
    stmt = (
        select(Message)
        .where(
            or_(
                Message.sender_id == query.user_id,
                Message.recipient_id == query.user_id,
            )
        )
        .order_by(Message.created_at.desc(), Message.id)
    )
    stmt = paginate(stmt, query.limit, query.offset)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def mark_message_as_read(session: AsyncSession, data: MarkMessageAsReadInput) -> None:
    """
    Set is_read on the message if and only if ``data.user_id`` is its recipient.

    The recipient check lives in the WHERE clause, so a non-recipient matches
    zero rows and nothing changes.
    """
    stmt = (
        update(Message)
        .where(
            Message.id == data.message_id,
            Message.recipient_id == data.user_id,
        )
        .values(is_read=True)
        .execution_options(synchronize_session=False)
    )
    result = await session.execute(stmt)
    await session.commit()

    if result.rowcount:
        logger.info("message_marked_read message=%s by=%s", data.message_id, data.user_id)
    else:
        logger.info(
            "mark_message_as_read: no-op message=%s by=%s (absent or not recipient)",
            data.message_id,
            data.user_id,
        )
