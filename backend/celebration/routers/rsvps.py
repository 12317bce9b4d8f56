"""RSVP API routes."""
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from celebration.deps import get_record_store
from celebration.errors import StorageError
from celebration.schemas.rsvp import RsvpOut
from celebration.schemas.validation import Rejected
from celebration.services import submission_service
from celebration.services.record_store import RecordKind, RecordStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/rsvp", response_model=RsvpOut, status_code=status.HTTP_201_CREATED)
def create_rsvp(payload: Any = Body(None), store: RecordStore = Depends(get_record_store)):
    """Validate and store an RSVP. Field errors come back as 400."""
    try:
        result = submission_service.submit_record(RecordKind.rsvp, payload, store)
    except StorageError:
        logger.exception("Error creating RSVP")
        raise HTTPException(status_code=500, detail="Failed to create RSVP")

    if isinstance(result, Rejected):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid RSVP data", "errors": result.errors},
        )
    return result.record


@router.get("/rsvps", response_model=list[RsvpOut])
def list_rsvps(store: RecordStore = Depends(get_record_store)):
    """All RSVPs, oldest first."""
    try:
        return store.list(RecordKind.rsvp)
    except StorageError:
        logger.exception("Error fetching RSVPs")
        raise HTTPException(status_code=500, detail="Failed to fetch RSVPs")
