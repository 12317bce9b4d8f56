"""Event details and countdown."""
from datetime import datetime, timezone

from fastapi import APIRouter

from celebration.config import settings
from celebration.services.countdown_service import countdown, event_start

router = APIRouter()


@router.get("/event")
def get_event():
    starts_at = event_start()
    return {
        "name": settings.EVENT_NAME,
        "startsAt": starts_at.isoformat(),
        "countdown": countdown(datetime.now(timezone.utc), starts_at),
    }
