"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from celebration.config import settings
from celebration.database import Base, engine, get_db
from celebration.deps import get_object_store
from celebration.errors import StorageUnavailable
from celebration.logging_config import setup_logging
from celebration.routers import event, media, memories, rsvps
from celebration.services.record_store import RecordKind, RecordStore
from celebration.storage.object_store import LocalObjectStore

# Import all models so Base.metadata knows about them
from celebration.models.rsvp import Rsvp        # noqa: F401
from celebration.models.memory import Memory    # noqa: F401

setup_logging()
logger = logging.getLogger(__name__)


def _resolve(app: FastAPI, dependency):
    """The dependency as the app would inject it, honouring overrides."""
    return app.dependency_overrides.get(dependency, dependency)


def initialize_storage(db: Session, object_store: LocalObjectStore) -> None:
    """Check the record tables and make sure the photo bucket exists."""
    store = RecordStore(db)
    for kind in RecordKind:
        if store.probe(kind):
            logger.info("%s table exists and is accessible", kind.value)

    try:
        if not object_store.ensure_bucket(settings.PHOTO_BUCKET):
            logger.info("'%s' bucket already exists", settings.PHOTO_BUCKET)
    except StorageUnavailable as exc:
        logger.error("Photo bucket unavailable: %s", exc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Tables are created here only in SQLite dev mode with the real database
    if get_db not in app.dependency_overrides and settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)

    sessions = _resolve(app, get_db)()
    try:
        initialize_storage(next(sessions), _resolve(app, get_object_store)())
    finally:
        sessions.close()
    yield


app = FastAPI(
    title="Celebration",
    description="Single-event invitation site: RSVPs, shared memories and photos",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(rsvps.router, prefix="/api", tags=["RSVPs"])
app.include_router(memories.router, prefix="/api", tags=["Memories"])
app.include_router(event.router, prefix="/api", tags=["Event"])
app.include_router(media.router, prefix="/media", tags=["Media"])


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
