"""
Shared test fixtures: SQLite test database and FastAPI test client.
"""

import os
import pytest
from fastapi.testclient import TestClient

TEST_DATABASE_URL = "sqlite:///./test.db"

# Point settings at the test database before importing app modules
os.environ["DATABASE_URL"] = TEST_DATABASE_URL

from cnc_tools.database import Base, get_engine, get_session_factory
from cnc_tools.main import app
from cnc_tools import models  # noqa: F401  registers tables on Base.metadata


# The app's get_db dependency draws from this same engine and session factory
engine = get_engine(TEST_DATABASE_URL)
TestingSessionLocal = get_session_factory()


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def db():
    """Direct database session for test setup/assertions."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
