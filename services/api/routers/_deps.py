"""Shared helpers for the companion routers: session dependency and response envelope."""

import uuid
from typing import Any

from fastapi import Request
from pydantic import BaseModel

from services.api.db.session import get_db

__all__ = ["get_db", "Envelope", "envelope", "request_id_of"]


class Envelope(BaseModel):
    success: bool
    data: Any = None
    requestId: str


def request_id_of(request: Request) -> str:
    return getattr(request.state, "request_id", str(uuid.uuid4()))


def envelope(request: Request, data: Any = None) -> Envelope:
    """Wrap ``data`` (already JSON-ready) in the {success, data, requestId} shape."""
    return Envelope(success=True, data=data, requestId=request_id_of(request))
