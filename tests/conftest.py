"""Pytest fixtures for the contact store, service and HTTP app."""

import pytest
from fastapi.testclient import TestClient

from contact_api.app.core.store import ContactStore
from contact_api.app.main import create_app
from contact_api.app.services.contact_service import ContactService


@pytest.fixture
def store():
    """Fresh, empty in-memory store."""
    return ContactStore()


@pytest.fixture
def service(store):
    return ContactService(store)


@pytest.fixture
def app():
    """Application with its own empty store."""
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
