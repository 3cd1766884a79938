"""
CORS for the browser clients listed in CORS_ORIGINS.

The API is cookie-less and unauthenticated, so credentials are not allowed.
Methods mirror the routes actually mounted; X-Request-ID is exposed so a
client can quote it when reporting an error envelope.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from services.api.config import settings

ROUTE_METHODS = ["GET", "POST", "PATCH", "DELETE"]
REQUEST_HEADERS = ["Content-Type", "X-Request-ID"]


def setup_cors(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=ROUTE_METHODS,
        allow_headers=REQUEST_HEADERS,
        expose_headers=["X-Request-ID"],
        max_age=settings.cors_max_age,
    )
