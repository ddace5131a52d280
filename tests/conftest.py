"""Shared pytest fixtures for the Bird Watching test suite."""

from contextlib import closing

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from birdwatch.database import get_db, init_db
from birdwatch.main import create_app
from birdwatch.seed import seed_birds


def _memory_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def engine():
    """In-memory SQLite engine with the schema created."""
    engine = _memory_engine()
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def empty_engine():
    """In-memory SQLite engine with no tables at all."""
    engine = _memory_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    with closing(session_factory()) as session:
        yield session


@pytest.fixture
def seeded(db_session):
    """Database populated with the four seed birds."""
    seed_birds(db_session)
    return db_session


def _make_client(session_factory: sessionmaker, settings=None) -> TestClient:
    app = create_app(settings)

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager, so the startup hook never touches
    # the configured database
    return TestClient(app)


@pytest.fixture
def client(session_factory) -> TestClient:
    return _make_client(session_factory)


@pytest.fixture
def client_factory():
    """Build a test client for a given session factory and optional settings."""
    return _make_client
