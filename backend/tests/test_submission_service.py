"""Tests for submission_service.submit_record: validation, photos, persistence."""
from celebration.schemas.validation import Rejected
from celebration.services.photo_service import PhotoIngestor
from celebration.services.record_store import RecordKind, RecordStore
from celebration.services.submission_service import Accepted, submit_record
from tests.conftest import TINY_PNG


class SpyStore:
    """Record store double that remembers every create call."""

    def __init__(self):
        self.created = []

    def create(self, kind, record):
        self.created.append((kind, record))
        return {"id": len(self.created), **record, "createdAt": "2025-05-01T12:00:00+00:00"}


class TestRsvpSubmission:
    def test_valid_payload_echoed(self, db):
        payload = {
            "fullName": "Amari Lee",
            "phone": "5551234567",
            "guests": 2,
            "dietary": "None",
            "message": "See you there",
        }
        result = submit_record(RecordKind.rsvp, payload, RecordStore(db))
        assert isinstance(result, Accepted)
        record = result.record
        for key, value in payload.items():
            assert record[key] == value
        assert isinstance(record["id"], int)
        assert record["createdAt"]

    def test_guests_string_coerced(self, db):
        result = submit_record(
            RecordKind.rsvp,
            {"fullName": "Amari Lee", "phone": "5551234567", "guests": "2"},
            RecordStore(db),
        )
        assert result.record["guests"] == 2

    def test_missing_name_never_reaches_store(self):
        store = SpyStore()
        result = submit_record(RecordKind.rsvp, {"phone": "5551234567", "guests": "1"}, store)
        assert isinstance(result, Rejected)
        assert "fullName" in result.errors
        assert store.created == []

    def test_short_name_never_reaches_store(self):
        store = SpyStore()
        result = submit_record(RecordKind.rsvp, {"fullName": "A", "phone": "5551234567", "guests": "1"}, store)
        assert isinstance(result, Rejected)
        assert result.errors["fullName"] == ["Name is required"]
        assert store.created == []

    def test_non_object_payload_rejected(self):
        store = SpyStore()
        result = submit_record(RecordKind.rsvp, ["not", "a", "dict"], store)
        assert isinstance(result, Rejected)
        assert store.created == []


class TestMemorySubmission:
    def test_photo_ingested_before_store(self, object_store):
        store = SpyStore()
        photos = PhotoIngestor(object_store)
        result = submit_record(
            RecordKind.memory,
            {"name": "Priya", "message": "Congrats", "photo": TINY_PNG},
            store,
            photos,
        )
        assert isinstance(result, Accepted)
        _, stored = store.created[0]
        assert stored["photo"].endswith(".png")
        assert not stored["photo"].startswith("data:")

    def test_malformed_photo_stored_without_photo(self, object_store):
        store = SpyStore()
        result = submit_record(
            RecordKind.memory,
            {"name": "Priya", "message": "Congrats", "photo": "image/png;base64,AAAA"},
            store,
            PhotoIngestor(object_store),
        )
        assert isinstance(result, Accepted)
        assert result.record["photo"] is None

    def test_photo_without_ingestor_dropped(self):
        store = SpyStore()
        result = submit_record(RecordKind.memory, {"name": "Priya", "message": "Hi", "photo": TINY_PNG}, store)
        assert result.record["photo"] is None

    def test_empty_photo_stored_as_none(self, object_store):
        store = SpyStore()
        result = submit_record(
            RecordKind.memory,
            {"name": "Priya", "message": "Congrats", "photo": ""},
            store,
            PhotoIngestor(object_store),
        )
        assert result.record["photo"] is None
        assert not object_store.bucket_exists("memories")
