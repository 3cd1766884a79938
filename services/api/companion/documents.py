"""
Travel document metadata. Only the integrity hash, URL, size and MIME type
are stored; the file itself lives wherever ``file_url`` points.
"""

import logging

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from services.api.companion.schemas import CreateTravelDocumentInput
from services.api.companion.store import utcnow, write_guard
from services.api.db.models import TravelDocument, new_id

logger = logging.getLogger(__name__)


async def create_travel_document(
    session: AsyncSession, data: CreateTravelDocumentInput
) -> TravelDocument:
    now = utcnow()
    stmt = (
        insert(TravelDocument)
        .values(id=new_id(), **data.model_dump(), created_at=now, updated_at=now)
        .returning(TravelDocument)
    )
    async with write_guard(session, "create_travel_document"):
        result = await session.execute(stmt)
        document = result.scalars().one()

    logger.info(
        "travel_document_created document=%s user=%s type=%s size=%d",
        document.id,
        document.user_id,
        document.type,
        document.file_size,
    )
    return document


async def get_user_documents(session: AsyncSession, user_id: str) -> list[TravelDocument]:
    # Order is not part of the contract; id keeps repeated reads identical.
    stmt = select(TravelDocument).where(TravelDocument.user_id == user_id).order_by(TravelDocument.id)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def delete_travel_document(session: AsyncSession, document_id: str) -> None:
    """Idempotent. No ownership check: any caller holding the id may delete."""
    result = await session.execute(delete(TravelDocument).where(TravelDocument.id == document_id))
    await session.commit()
    logger.info("travel_document_deleted document=%s rows=%d", document_id, result.rowcount)
