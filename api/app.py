"""
FastAPI application factory.

Creates and configures the FastAPI app with CORS, routers, and table
creation on startup.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import AppSettings
from db.engine import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Build the API application.

    ``settings`` controls the app metadata, debug flag and CORS origins. The
    database is the module-level engine in db/engine.py, configured from
    DATABASE_URL at import time; tests swap it by overriding ``get_db``.
    """
    settings = settings or AppSettings.from_env()

    app = FastAPI(
        title=settings.api.title,
        description="Profile building and completeness scoring for the resume builder",
        version=settings.api.version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import profiles, completeness

    app.include_router(profiles.router, prefix="/api/profiles", tags=["profiles"])
    app.include_router(completeness.router, prefix="/api", tags=["completeness"])

    @app.get("/api/health")
    def health_check():
        return {"status": "ok"}

    return app
