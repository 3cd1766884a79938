"""
Global post feed: every post is visible to everyone, newest first.
"""

import logging
from typing import Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from services.api.companion.schemas import CreatePostInput, GetPostsInput
from services.api.companion.store import paginate, utcnow, write_guard
from services.api.config import settings
from services.api.db.models import Post, new_id

logger = logging.getLogger(__name__)


async def create_post(session: AsyncSession, data: CreatePostInput) -> Post:
    now = utcnow()
    stmt = (
        insert(Post)
        .values(
            id=new_id(),
            user_id=data.user_id,
            content=data.content,
            image_urls=list(data.image_urls),
            location=data.location,
            created_at=now,
            updated_at=now,
        )
        .returning(Post)
    )
    async with write_guard(session, "create_post"):
        result = await session.execute(stmt)
        post = result.scalars().one()

    logger.info("post_created post=%s user=%s images=%d", post.id, post.user_id, len(post.image_urls))
    return post


def resolve_feed_window(query: Optional[GetPostsInput]) -> tuple[Optional[int], int]:
    """
    Return (limit, offset) for the feed.

    Only fields the caller left out fall back to the defaults (limit from
    settings, offset 0). An explicitly supplied null limit means unbounded;
    an explicitly supplied null offset is 0.
    """
    provided = query.model_fields_set if query is not None else set()
    limit = query.limit if "limit" in provided else settings.posts_default_limit
    offset = query.offset if "offset" in provided else 0
    return limit, offset or 0


async def get_posts(session: AsyncSession, query: Optional[GetPostsInput] = None) -> list[Post]:
    limit, offset = resolve_feed_window(query)
    stmt = select(Post).order_by(Post.created_at.desc(), Post.id)
    stmt = paginate(stmt, limit, offset)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def delete_post(session: AsyncSession, post_id: str) -> None:
    """Idempotent: deleting an absent post is a silent success."""
    result = await session.execute(delete(Post).where(Post.id == post_id))
    await session.commit()
    logger.info("post_deleted post=%s rows=%d", post_id, result.rowcount)
