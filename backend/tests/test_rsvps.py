"""Tests for the RSVP endpoints."""
from tests.conftest import create_test_rsvp


class TestRsvpCreate:
    """POST /api/rsvp"""

    def test_create_rsvp(self, client):
        data = create_test_rsvp(client, full_name="Amari Lee", guests="2")
        assert data["fullName"] == "Amari Lee"
        assert data["phone"] == "5551234567"
        assert data["guests"] == 2
        assert isinstance(data["id"], int)
        assert data["createdAt"]

    def test_optional_fields_echoed(self, client):
        data = create_test_rsvp(client, dietary="Vegetarian", message="Can't wait!")
        assert data["dietary"] == "Vegetarian"
        assert data["message"] == "Can't wait!"

    def test_optional_fields_absent(self, client):
        data = create_test_rsvp(client)
        assert data["dietary"] is None
        assert data["message"] is None

    def test_guests_accepts_integer(self, client):
        data = create_test_rsvp(client, guests=3)
        assert data["guests"] == 3

    def test_missing_full_name(self, client):
        resp = client.post("/api/rsvp", json={"phone": "5551234567", "guests": "2"})
        assert resp.status_code == 400
        body = resp.json()
        assert body["message"] == "Invalid RSVP data"
        assert body["errors"]["fullName"] == ["Name is required"]

    def test_short_fields(self, client):
        resp = client.post("/api/rsvp", json={"fullName": "A", "phone": "123", "guests": ""})
        assert resp.status_code == 400
        errors = resp.json()["errors"]
        assert errors["fullName"] == ["Name is required"]
        assert errors["phone"] == ["Phone number is required"]
        assert errors["guests"] == ["Number of guests is required"]

    def test_rejected_rsvp_not_stored(self, client):
        client.post("/api/rsvp", json={"fullName": "A", "phone": "5551234567", "guests": "1"})
        assert client.get("/api/rsvps").json() == []

    def test_zero_guests_rejected(self, client):
        resp = client.post("/api/rsvp", json={"fullName": "Amari", "phone": "5551234567", "guests": "0"})
        assert resp.status_code == 400
        assert "guests" in resp.json()["errors"]

    def test_empty_body_rejected(self, client):
        resp = client.post("/api/rsvp")
        assert resp.status_code == 400
        body = resp.json()
        assert body["message"] == "Invalid RSVP data"
        assert "payload" in body["errors"]

    def test_array_body_rejected(self, client):
        resp = client.post("/api/rsvp", json=[{"fullName": "Amari Lee"}])
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid RSVP data"
        assert client.get("/api/rsvps").json() == []


class TestRsvpList:
    """GET /api/rsvps"""

    def test_list_chronological(self, client):
        first = create_test_rsvp(client, full_name="First Guest")
        second = create_test_rsvp(client, full_name="Second Guest")
        resp = client.get("/api/rsvps")
        assert resp.status_code == 200
        ids = [r["id"] for r in resp.json()]
        assert ids == [first["id"], second["id"]]

    def test_list_uses_camel_case(self, client):
        create_test_rsvp(client)
        record = client.get("/api/rsvps").json()[0]
        assert "fullName" in record
        assert "createdAt" in record
        assert "full_name" not in record


class TestRsvpWithoutTables:
    """A store whose tables were never created."""

    def test_list_empty(self, bare_client):
        resp = bare_client.get("/api/rsvps")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_create_returns_synthesized_record(self, bare_client):
        resp = bare_client.post("/api/rsvp", json={
            "fullName": "Amari Lee", "phone": "5551234567", "guests": "2",
        })
        assert resp.status_code == 201
        data = resp.json()
        assert data["fullName"] == "Amari Lee"
        assert data["guests"] == 2
        # Synthesized ids are epoch milliseconds
        assert data["id"] > 1_000_000_000_000
