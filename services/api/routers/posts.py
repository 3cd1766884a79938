"""
Social feed.

Endpoints:
  POST   /posts            -- createPost
  GET    /posts            -- getPosts (?limit=&offset=; defaults 50/0 when omitted)
  DELETE /posts/{post_id}  -- deletePost (idempotent)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from services.api.companion import posts as posts_core
from services.api.companion.schemas import CreatePostInput, GetPostsInput, PostOut
from services.api.routers._deps import Envelope, envelope, get_db

router = APIRouter(prefix="/posts", tags=["posts"])


def _post_payload(post) -> dict:
    return PostOut.model_validate(post).model_dump(mode="json")


@router.post("", response_model=Envelope, status_code=201, name="createPost")
async def create_post(
    body: CreatePostInput,
    request: Request,
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    post = await posts_core.create_post(session, body)
    return envelope(request, _post_payload(post))


@router.get("", response_model=Envelope, name="getPosts")
async def get_posts(
    request: Request,
    limit: Optional[int] = Query(None, gt=0),
    offset: Optional[int] = Query(None, ge=0),
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    # Only parameters actually present on the query string count as supplied.
    supplied = {k: v for k, v in (("limit", limit), ("offset", offset)) if v is not None}
    posts = await posts_core.get_posts(session, GetPostsInput(**supplied))
    return envelope(request, [_post_payload(p) for p in posts])


@router.delete("/{post_id}", response_model=Envelope, name="deletePost")
async def delete_post(
    post_id: str,
    request: Request,
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    await posts_core.delete_post(session, post_id)
    return envelope(request)
