"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from services.api.routers._deps import request_id_of

router = APIRouter(tags=["health"])


@router.get("/health", name="healthcheck")
async def health_check(request: Request) -> dict:
    factory = getattr(request.app.state, "db_session_factory", None)
    return {
        "success": True,
        "data": {
            "status": "healthy",
            "version": request.app.state.settings.app_version,
            "database": "configured" if factory is not None else "unavailable",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
        "requestId": request_id_of(request),
    }
