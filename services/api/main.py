"""
Wayfarer FastAPI service: profiles, itineraries, documents, feed, messaging and discovery.

Entrypoint: uvicorn services.api.main:app --host 0.0.0.0 --port 8000
"""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from sqlalchemy.ext.asyncio import async_sessionmaker
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from services.api.companion.errors import CompanionError
from services.api.config import settings
from services.api.db.engine import create_engine, create_schema
from services.api.middleware.cors import setup_cors
from services.api.middleware.sentry import setup_sentry
from services.api.routers import health, users, travel_plans, travel_documents
from services.api.routers import posts, messages, discovery

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    setup_sentry()
    app.state.settings = settings

    engine = create_engine()
    if settings.database_create_schema:
        await create_schema(engine)
    app.state.db_engine = engine
    # expire_on_commit=False: records returned by a write are read after commit.
    app.state.db_session_factory = async_sessionmaker(engine, expire_on_commit=False)

    yield

    await engine.dispose()


app = FastAPI(
    title="Wayfarer API",
    version=settings.app_version,
    docs_url="/docs" if settings.environment == "development" else None,
    redoc_url=None,
    lifespan=lifespan,
)
app.state.settings = settings

# -- Middleware (order matters: last added = outermost in Starlette) --

# Routers first (innermost)
app.include_router(health.router)
app.include_router(users.router)
app.include_router(travel_plans.router)
app.include_router(travel_documents.router)
app.include_router(posts.router)
app.include_router(messages.router)
app.include_router(discovery.router)

# CORS (needs to be outermost to handle preflight)
setup_cors(app)


# Request ID injection
@app.middleware("http")
async def request_envelope_middleware(request: Request, call_next) -> Response:
    request_id = request.headers.get("x-request-id", str(uuid.uuid4()))
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


# -- Exception Handlers --


def _error_response(request: Request, status_code: int, code: str, message: str) -> JSONResponse:
    request_id = getattr(request.state, "request_id", str(uuid.uuid4()))
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": {"code": code, "message": message},
            "requestId": request_id,
        },
        headers={"X-Request-ID": request_id},
    )


@app.exception_handler(CompanionError)
async def companion_error_handler(request: Request, exc: CompanionError) -> JSONResponse:
    logger.warning("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
    return _error_response(request, exc.status_code, exc.code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [".".join(str(p) for p in err.get("loc", ())) for err in exc.errors()]
    message = f"Invalid input: {', '.join(fields)}" if fields else "Validation error."
    return _error_response(request, 422, "VALIDATION_ERROR", message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return _error_response(request, 404, "NOT_FOUND", "Resource not found.")
    if exc.status_code == 405:
        return _error_response(request, 405, "METHOD_NOT_ALLOWED", "Method not allowed.")
    if exc.status_code == 503:
        return _error_response(request, 503, "SERVICE_UNAVAILABLE", str(exc.detail))
    return _error_response(request, exc.status_code, "HTTP_ERROR", str(exc.detail))


@app.exception_handler(500)
async def internal_error_handler(request: Request, exc) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(request, 500, "INTERNAL_ERROR", "An unexpected error occurred.")
