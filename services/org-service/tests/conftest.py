"""
Test configuration and fixtures
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.app import app
from app.database import get_db
from app.domain.entities import Agent, PopulatedChannel
from app.models import Base
from factories import (
    AGENT_ID,
    ASSOCIATE_LEVEL_ID,
    CHANNEL_ID,
    DIRECTOR_LEVEL_ID,
    MANAGER_LEVEL_ID,
    make_level,
)

# Create in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    # Mock init_db to prevent creating tables outside the test database
    with patch("app.app.init_db"):
        app.dependency_overrides[get_db] = override_get_db
        with TestClient(app) as test_client:
            yield test_client
        app.dependency_overrides.clear()


@pytest.fixture
def channel_levels():
    """Director / Manager / Associate levels of one channel, Associate being the anchor."""
    return [
        make_level(DIRECTOR_LEVEL_ID, "Director", "5", 1),
        make_level(MANAGER_LEVEL_ID, "Manager", "10", 2),
        make_level(ASSOCIATE_LEVEL_ID, "Associate", "18", 3),
    ]


@pytest.fixture
def associate_agent():
    """Agent holding an Associate designation, channel populated."""
    return Agent(
        id=AGENT_ID,
        agent_code="AG0001",
        designation_id="d" * 24,
        channel=PopulatedChannel(id=CHANNEL_ID, name="Bancassurance", code="BANCA"),
        first_name="Asha",
        last_name="Verma",
    )
