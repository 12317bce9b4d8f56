"""Submission service: validate, ingest photo, persist.

Returns a tagged result rather than raising for bad input:
- ``Accepted(record)``: the stored (or synthesized) record, camelCase keys
- ``Rejected(errors)``: per-field messages; nothing was written
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from celebration.errors import FormatError
from celebration.schemas.memory import MemoryCreate
from celebration.schemas.rsvp import RsvpCreate
from celebration.schemas.validation import Rejected, check
from celebration.services.photo_service import PhotoIngestor
from celebration.services.record_store import RecordKind, RecordStore

logger = logging.getLogger(__name__)

CREATE_SCHEMAS = {
    RecordKind.rsvp: RsvpCreate,
    RecordKind.memory: MemoryCreate,
}


@dataclass(frozen=True)
class Accepted:
    record: dict[str, Any]


SubmissionResult = Union[Accepted, Rejected]


def _ingest_photo(photo: str, photos: Optional[PhotoIngestor]) -> Optional[str]:
    if photos is None:
        logger.warning("No photo ingestor configured; dropping photo")
        return None
    try:
        return photos.ingest(photo)
    except FormatError as exc:
        logger.warning("Dropping malformed photo: %s", exc)
        return None


def submit_record(
    kind: RecordKind,
    payload: Any,
    store: RecordStore,
    photos: Optional[PhotoIngestor] = None,
) -> SubmissionResult:
    """Validate ``payload`` for ``kind`` and persist it through ``store``.

    A photo that cannot be ingested never fails the submission; the memory
    is stored without it. StorageError propagates for unexpected DB failures.
    """
    checked = check(CREATE_SCHEMAS[kind], payload)
    if isinstance(checked, Rejected):
        logger.info("Rejected %s submission: %s", kind.value, ", ".join(sorted(checked.errors)))
        return checked

    record = checked.model_dump(by_alias=True)
    if kind is RecordKind.memory:
        photo = record.get("photo")
        record["photo"] = _ingest_photo(photo, photos) if photo else None

    return Accepted(store.create(kind, record))
