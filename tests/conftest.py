"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from complaint_tracker_api.app.core.config import Settings
from complaint_tracker_api.app.core.store import ComplaintStore
from complaint_tracker_api.app.main import create_app
from complaint_tracker_api.app.schemas.complaint import Complaint
from complaint_tracker_api.app.schemas.user import User


ADMIN_CODE = "admin"


@pytest.fixture
def store():
    """Create an empty store for each test."""
    return ComplaintStore()


@pytest.fixture
def app(store):
    """Create a FastAPI app serving the per-test store."""
    return create_app(Settings(admin_secret_code=ADMIN_CODE), store=store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def sample_user():
    return User(secret_code="c1", name="Alice", email="alice@example.com")


@pytest.fixture
def sample_complaint():
    return Complaint(title="Noise", summary="Loud music after midnight", severity=5, secret_code="c1")

