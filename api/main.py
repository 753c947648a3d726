"""Lending Library API - FastAPI entry point.

Registers middleware, the library router and lifecycle hooks. The app owns
a single LibraryAccess facade on ``app.state.library``.
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from verticals.library.config import config
from verticals.library.facade import LibraryAccess
from verticals.library.router import router as library_router

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS", "http://localhost:3000,http://localhost:3001"
).split(",")
DEBUG = os.getenv("DEBUG", "true").lower() == "true"
VERSION = "0.1.0"


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown hooks."""
    logging.basicConfig(level=logging.DEBUG if DEBUG else logging.INFO)
    logger.info("Lending Library API started")
    yield
    logger.info("Lending Library API shutting down")


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

def create_app(library: Optional[LibraryAccess] = None) -> FastAPI:
    app = FastAPI(
        title="Lending Library",
        description="Book lending lifecycle with premium access control",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.library = library or LibraryAccess(config=config)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(library_router, prefix="/api/library", tags=["Library"])

    @app.get("/health")
    async def health():
        return {"status": "healthy", "version": VERSION}

    @app.get("/")
    async def root():
        return {
            "name": "Lending Library",
            "version": VERSION,
            "docs": "/docs",
            "library": app.state.library.config.library_name,
        }

    return app


app = create_app()
