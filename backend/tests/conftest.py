"""Pytest fixtures: per-test SQLite database and a temporary photo bucket."""
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from celebration.database import Base, get_db
from celebration.deps import get_object_store
from celebration.main import app
from celebration.storage.object_store import LocalObjectStore

# Import all models so they register with Base.metadata
from celebration.models.rsvp import Rsvp        # noqa: F401
from celebration.models.memory import Memory    # noqa: F401

SQLITE_URL = "sqlite:///./test.db"
PUBLIC_BASE_URL = "http://testserver"

TINY_PNG = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine with all tables for each test."""
    engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})

    # Enable WAL mode for better concurrency
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def bare_engine():
    """In-memory SQLite engine with no tables, like a store nobody set up."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session, closed after the test."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def object_store(tmp_path):
    return LocalObjectStore(tmp_path / "media", public_base_url=PUBLIC_BASE_URL)


def _override_dependencies(engine, object_store):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_object_store] = lambda: object_store


@pytest.fixture(scope="function")
def client(db_engine, object_store):
    """FastAPI TestClient with the database and bucket overridden."""
    _override_dependencies(db_engine, object_store)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def bare_client(bare_engine, object_store):
    """TestClient against a database where no tables exist."""
    _override_dependencies(bare_engine, object_store)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def asgi_app(db_engine, object_store):
    """The app with overrides applied, for httpx.ASGITransport."""
    _override_dependencies(db_engine, object_store)
    yield app
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers: submit via the API, return the response JSON
# ---------------------------------------------------------------------------
def create_test_rsvp(client: TestClient, full_name: str = "Amari Lee", guests="2", **extra) -> dict:
    """POST /api/rsvp and return response JSON."""
    resp = client.post("/api/rsvp", json={
        "fullName": full_name,
        "phone": "5551234567",
        "guests": guests,
        **extra,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_test_memory(client: TestClient, name: str = "Priya", message: str = "Congrats!", **extra) -> dict:
    """POST /api/memories and return response JSON."""
    resp = client.post("/api/memories", json={"name": name, "message": message, **extra})
    assert resp.status_code == 201, resp.text
    return resp.json()
