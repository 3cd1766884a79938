"""
Factory functions for companion records.

make_*  -> dict of column values (override anything via kwargs)
seed_*  -> insert the row straight into the store and return the ORM object,
           bypassing the operations so tests control timestamps exactly

Usage:
    from services.api.tests.helpers.factories import make_user, seed_user
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from services.api.db.models import Message, Post, TravelDocument, TravelPlan, User

BASE_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _gen_id() -> str:
    return str(uuid.uuid4())


def make_user(**overrides: Any) -> dict:
    base = {
        "id": _gen_id(),
        "email": f"traveler-{uuid.uuid4().hex[:8]}@example.com",
        "name": "Test Traveler",
        "image": None,
        "bio": None,
        "location": None,
        "interests": [],
        "is_discoverable": False,
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    base.update(overrides)
    return base


def make_travel_plan(user_id: str, **overrides: Any) -> dict:
    base = {
        "id": _gen_id(),
        "user_id": user_id,
        "mode": "flight",
        "departure_time": BASE_TIME + timedelta(days=7),
        "arrival_time": BASE_TIME + timedelta(days=7, hours=2),
        "departure_location": "CDG",
        "arrival_location": "LIS",
        "booking_reference": None,
        "duration_minutes": None,
        "travel_provider": None,
        "additional_info": None,
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    base.update(overrides)
    return base


def make_travel_document(user_id: str, **overrides: Any) -> dict:
    base = {
        "id": _gen_id(),
        "user_id": user_id,
        "name": "Passport scan",
        "type": "passport",
        "file_hash": uuid.uuid4().hex,
        "file_url": f"https://files.example.com/{uuid.uuid4().hex}.pdf",
        "file_size": 204_800,
        "mime_type": "application/pdf",
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    base.update(overrides)
    return base


def make_post(user_id: str, **overrides: Any) -> dict:
    base = {
        "id": _gen_id(),
        "user_id": user_id,
        "content": "Sunset over the Tagus",
        "image_urls": [],
        "location": None,
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    base.update(overrides)
    return base


def make_message(sender_id: str, recipient_id: str, **overrides: Any) -> dict:
    base = {
        "id": _gen_id(),
        "sender_id": sender_id,
        "recipient_id": recipient_id,
        "content": "hi",
        "is_read": False,
        "created_at": BASE_TIME,
    }
    base.update(overrides)
    return base


async def _seed(session: AsyncSession, obj):
    session.add(obj)
    await session.commit()
    return obj


async def seed_user(session: AsyncSession, **overrides: Any) -> User:
    return await _seed(session, User(**make_user(**overrides)))


async def seed_travel_plan(session: AsyncSession, user_id: str, **overrides: Any) -> TravelPlan:
    return await _seed(session, TravelPlan(**make_travel_plan(user_id, **overrides)))


async def seed_travel_document(session: AsyncSession, user_id: str, **overrides: Any) -> TravelDocument:
    return await _seed(session, TravelDocument(**make_travel_document(user_id, **overrides)))


async def seed_post(session: AsyncSession, user_id: str, **overrides: Any) -> Post:
    return await _seed(session, Post(**make_post(user_id, **overrides)))


async def seed_message(session: AsyncSession, sender_id: str, recipient_id: str, **overrides: Any) -> Message:
    return await _seed(session, Message(**make_message(sender_id, recipient_id, **overrides)))
