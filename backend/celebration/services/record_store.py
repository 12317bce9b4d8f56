"""Record store: persists RSVPs and memories through SQLAlchemy.

Records cross this boundary as camelCase dicts (``fullName``); rows use
snake_case columns (``full_name``). Both directions go through the pydantic
alias generators so the mapping stays symmetric.

Availability wins over durability here: a missing table or a rejected write
does not fail ``create``. The caller gets a synthesized record instead, so
nothing downstream may assume a returned record was persisted.
"""
import enum
import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable

from pydantic.alias_generators import to_camel, to_snake
from sqlalchemy.exc import DBAPIError
from sqlalchemy.orm import Session

from celebration.errors import StorageError
from celebration.models.memory import Memory
from celebration.models.rsvp import Rsvp

logger = logging.getLogger(__name__)

# Driver messages meaning "table missing" or "access policy said no"
UNAVAILABLE_MARKERS = (
    "does not exist",
    "no such table",
    "row-level security",
    "permission denied",
)


class RecordKind(str, enum.Enum):
    rsvp = "rsvp"
    memory = "memory"


_MODELS = {
    RecordKind.rsvp: Rsvp,
    RecordKind.memory: Memory,
}

# RSVPs read oldest first, memories newest first
_NEWEST_FIRST = {
    RecordKind.rsvp: False,
    RecordKind.memory: True,
}


def to_store_fields(record: dict[str, Any]) -> dict[str, Any]:
    return {to_snake(key): value for key, value in record.items()}


def from_store_fields(row: dict[str, Any]) -> dict[str, Any]:
    return {to_camel(key): value for key, value in row.items()}


def is_storage_unavailable(exc: BaseException) -> bool:
    message = str(getattr(exc, "orig", None) or exc).lower()
    return any(marker in message for marker in UNAVAILABLE_MARKERS)


class RecordStore:
    def __init__(self, db: Session, clock: Callable[[], float] = time.time):
        self.db = db
        self._clock = clock

    def _now_iso(self) -> str:
        return datetime.fromtimestamp(self._clock(), timezone.utc).isoformat()

    def _row_to_record(self, row) -> dict[str, Any]:
        columns = row.__table__.columns.keys()
        return from_store_fields({name: getattr(row, name) for name in columns})

    def create(self, kind: RecordKind, record: dict[str, Any]) -> dict[str, Any]:
        """Insert a record and return it with its id and ``createdAt``."""
        model = _MODELS[kind]
        created_at = self._now_iso()
        columns = set(model.__table__.columns.keys()) - {"id", "created_at"}
        fields = {k: v for k, v in to_store_fields(record).items() if k in columns}
        row = model(**fields, created_at=created_at)

        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except DBAPIError as exc:
            self.db.rollback()
            if not is_storage_unavailable(exc):
                raise StorageError(f"Failed to create {kind.value}: {exc.orig}") from exc
            logger.warning(
                "%s table unavailable (%s); returning unsaved record",
                kind.value, exc.orig,
            )
            return self._synthesize(record, created_at)

        logger.info("Stored %s %s", kind.value, row.id)
        return self._row_to_record(row)

    def _synthesize(self, record: dict[str, Any], created_at: str) -> dict[str, Any]:
        return {"id": int(self._clock() * 1000), **record, "createdAt": created_at}

    def list(self, kind: RecordKind) -> list[dict[str, Any]]:
        """All records of ``kind``; an absent table reads as empty."""
        model = _MODELS[kind]
        if _NEWEST_FIRST[kind]:
            order = (model.created_at.desc(), model.id.desc())
        else:
            order = (model.created_at.asc(), model.id.asc())
        try:
            rows = self.db.query(model).order_by(*order).all()
        except DBAPIError as exc:
            self.db.rollback()
            if not is_storage_unavailable(exc):
                raise StorageError(f"Failed to list {kind.value}: {exc.orig}") from exc
            logger.info("%s table does not exist yet, returning no records", kind.value)
            return []
        return [self._row_to_record(row) for row in rows]

    def probe(self, kind: RecordKind) -> bool:
        """True when the table for ``kind`` can be read."""
        model = _MODELS[kind]
        try:
            self.db.query(model.id).limit(1).all()
        except DBAPIError as exc:
            self.db.rollback()
            logger.warning("%s table is not accessible: %s", kind.value, exc.orig)
            return False
        return True
