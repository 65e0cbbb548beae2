"""Shared pytest fixtures for videohub tests."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from videohub.api.app import create_app
from videohub.config import Settings
from videohub.store.memory import VideoStore

FIXED_NOW = datetime(2024, 3, 1, 9, 30, 15, 123456, tzinfo=timezone.utc)


@pytest.fixture
def store():
    """Create an empty store with a fixed clock."""
    return VideoStore(clock=lambda: FIXED_NOW)


@pytest.fixture
def client(store):
    """Create a test client serving the store fixture."""
    app = create_app(store=store, settings=Settings())
    return TestClient(app)


@pytest.fixture
def valid_update():
    """Full, valid PUT body."""
    return {
        "title": "Updated title",
        "author": "New author",
        "canBeDownloaded": True,
        "minAgeRestriction": 16,
        "publicationDate": "2025-01-01T00:00:00.000Z",
        "availableResolutions": ["P720", "P1080"],
    }
