"""Memory API routes."""
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from celebration.deps import get_photo_ingestor, get_record_store
from celebration.errors import StorageError
from celebration.schemas.memory import MemoryOut
from celebration.schemas.validation import Rejected
from celebration.services import submission_service
from celebration.services.photo_service import PhotoIngestor
from celebration.services.record_store import RecordKind, RecordStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/memories", response_model=MemoryOut, status_code=status.HTTP_201_CREATED)
def create_memory(
    payload: Any = Body(None),
    store: RecordStore = Depends(get_record_store),
    photos: PhotoIngestor = Depends(get_photo_ingestor),
):
    """Store a memory; an embedded photo is uploaded to the bucket first."""
    try:
        result = submission_service.submit_record(RecordKind.memory, payload, store, photos)
    except StorageError:
        logger.exception("Error creating memory")
        raise HTTPException(status_code=500, detail="Failed to create memory")

    if isinstance(result, Rejected):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid memory data", "errors": result.errors},
        )
    return result.record


@router.get("/memories", response_model=list[MemoryOut])
def list_memories(store: RecordStore = Depends(get_record_store)):
    """All memories, newest first."""
    try:
        return store.list(RecordKind.memory)
    except StorageError:
        logger.exception("Error fetching memories")
        raise HTTPException(status_code=500, detail="Failed to fetch memories")
