"""
SQLAlchemy async database module.

Re-exports engine, session, and model utilities for the FastAPI service.
"""

from services.api.db.engine import create_engine, create_schema, standalone_session
from services.api.db.session import get_db
from services.api.db.expressions import json_array_overlaps
from services.api.db.models import (
    Base,
    User,
    TravelPlan,
    TravelDocument,
    Post,
    Message,
)

__all__ = [
    "create_engine",
    "create_schema",
    "standalone_session",
    "get_db",
    "json_array_overlaps",
    "Base",
    "User",
    "TravelPlan",
    "TravelDocument",
    "Post",
    "Message",
]
