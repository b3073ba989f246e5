"""CORS configuration."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from folio.config import Settings


def allowed_origins(settings: Settings) -> list[str]:
    """Origins allowed to call the API with credentials."""
    origins = [settings.api.frontend_url]
    if settings.environment in ("development", "test"):
        for local in ("http://localhost:3000", "http://localhost:5173"):
            if local not in origins:
                origins.append(local)
    return origins


def add_cors(app: FastAPI, settings: Settings) -> None:
    """Install the CORS middleware.

    The auth cookie is sent cross-origin, so origins must be explicit.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins(settings),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )
