"""FastAPI dependencies for stores and the photo ingestor."""
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from celebration.config import settings
from celebration.database import get_db
from celebration.services.photo_service import PhotoIngestor
from celebration.services.record_store import RecordStore
from celebration.storage.object_store import LocalObjectStore


def get_record_store(db: Session = Depends(get_db)) -> RecordStore:
    return RecordStore(db)


@lru_cache
def get_object_store() -> LocalObjectStore:
    return LocalObjectStore(
        root=settings.MEDIA_ROOT,
        public_base_url=settings.PUBLIC_BASE_URL,
        max_object_bytes=settings.MAX_PHOTO_BYTES,
    )


def get_photo_ingestor(store: LocalObjectStore = Depends(get_object_store)) -> PhotoIngestor:
    return PhotoIngestor(
        store,
        bucket=settings.PHOTO_BUCKET,
        folder=settings.PHOTO_FOLDER,
        placeholder_url=settings.PHOTO_PLACEHOLDER_URL,
    )
