# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Points the app at an in-memory SQLite database before any imports
# - Provides a fresh database, store, service, HTTP client and API client
#   for every test
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from client.api import TodoApiClient
from core.services.todo_service import TodoService
from lib.database import Database
from lib.todo_store import TodoStore

IN_MEMORY_URL = "sqlite://"


# =============================================================================
# Persistence Fixtures
# =============================================================================

@pytest.fixture
def database():
    """A connected, empty in-memory database."""
    db = Database(IN_MEMORY_URL)
    db.connect()
    yield db
    db.dispose()


@pytest.fixture
def store(database):
    """TodoStore bound to the test database."""
    return TodoStore(database.engine)


@pytest.fixture
def service(store):
    """TodoService backed by the real store."""
    return TodoService(store)


# =============================================================================
# HTTP Fixtures
# =============================================================================

@pytest.fixture
def app():
    """A fresh application with its own in-memory database."""
    return create_app(Settings(DATABASE_URL=IN_MEMORY_URL, _env_file=None))


@pytest.fixture
def client(app):
    """TestClient with the app lifespan running (pool open, table created)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api(client):
    """TodoApiClient that talks to the test app."""
    return TodoApiClient(http_client=client)


@pytest.fixture
def sample_todo_row():
    """Sample todo row as returned by the store."""
    return {
        "id": 1,
        "text": "Buy milk",
        "completed": False,
        "created_at": "2024-01-15T10:30:00",
    }
