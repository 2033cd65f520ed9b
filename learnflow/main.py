"""
LearnFlow API application.

Creates the FastAPI app, wires middleware, exception handlers and routers,
and runs database setup on startup.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from learnflow.bootstrap import ensure_admin, seed_reference_data
from learnflow.config import configure_logging, get_settings
from learnflow.database import (
    create_tables,
    dispose_engine,
    get_session_factory,
    initialize_database,
)
from learnflow.exception_handlers import setup_exception_handlers
from learnflow.routers import (
    admin,
    ai,
    auth,
    catalogue,
    certificates,
    flashcards,
    gamification,
    learning_paths,
    question_papers,
    study_notes,
    users,
)

settings = get_settings()
configure_logging(settings.ENVIRONMENT)
logger = logging.getLogger(__name__)
structlog_logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Set up the database on startup and release it on shutdown."""
    initialize_database(settings)
    if settings.DATABASE_URL.startswith("sqlite"):
        create_tables()
    settings.UPLOADS_DIR.mkdir(parents=True, exist_ok=True)

    with get_session_factory(settings)() as db:
        if settings.SEED_REFERENCE_DATA:
            seed_reference_data(db)
        ensure_admin(db, settings)

    structlog_logger.info(
        "application_started",
        environment=settings.ENVIRONMENT,
        ai_provider=settings.AI_PROVIDER,
    )
    yield

    dispose_engine()
    logger.info("Application shut down")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Learning resources, gamified progress and AI study tools for LearnFlow.",
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=f"{settings.API_PREFIX}/docs",
    redoc_url=f"{settings.API_PREFIX}/redoc",
    lifespan=lifespan,
)

app.state.limiter = auth.limiter
setup_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module in (
    auth,
    users,
    catalogue,
    question_papers,
    study_notes,
    admin,
    gamification,
    learning_paths,
    flashcards,
    certificates,
    ai,
):
    app.include_router(module.router, prefix=settings.API_PREFIX)

# Uploaded PDFs; the directory is created at startup
app.mount("/uploads", StaticFiles(directory=settings.UPLOADS_DIR, check_dir=False), name="uploads")


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness check."""
    return {"status": "healthy"}


@app.get(f"{settings.API_PREFIX}/")
async def api_root() -> dict[str, str]:
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "docs": f"{settings.API_PREFIX}/docs",
    }
