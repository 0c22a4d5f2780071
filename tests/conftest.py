"""
Pytest configuration for Task API tests.

Every test gets its own in-memory SQLite database, so tests never share state
and need no environment variables.
"""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from app.config import Settings
from app.db.config import create_db_engine
from app.db.init import init_db
from app.main import create_app
from app.models.task import Task, utcnow

TEST_MCP_API_KEY = "test-mcp-key"


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def settings():
    """Settings for an isolated in-memory database."""
    return Settings(database_url="sqlite://", mcp_api_key=TEST_MCP_API_KEY)


@pytest.fixture
def engine(settings):
    """Engine with all tables created."""
    engine = create_db_engine(settings.database_url)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Database session for arranging and inspecting state directly."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def app(settings, engine):
    """FastAPI application bound to the test engine."""
    return create_app(settings, engine=engine)


@pytest.fixture
def client(app):
    """Create test client for FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mcp_headers():
    """Headers carrying the configured agent API key."""
    return {"X-AI-Agent-Api-Key": TEST_MCP_API_KEY}


# -----------------------------------------------------------------------------
# Data Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_task(session):
    """Factory inserting a task straight into the database."""
    def _make_task(**overrides) -> Task:
        now = utcnow()
        values = {
            "title": "Sample task",
            "description": "Sample description",
            "status": "pending",
            "created_at": now,
            "updated_at": now,
        }
        values.update(overrides)
        task = Task(**values)
        session.add(task)
        session.commit()
        session.refresh(task)
        return task

    return _make_task
