"""Shared fixtures: a fresh seeded repository and an app built around it per test."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from jay_auto_api.app.core.config import Settings
from jay_auto_api.app.core.storage import MemStorage, init_storage
from jay_auto_api.app.main import create_app

ADMIN_TOKEN = "staff-only-token"


@pytest.fixture
def storage() -> MemStorage:
    return init_storage()


@pytest.fixture
def client(storage):
    """Client for an app without an admin token (open inquiry listing)."""
    app = create_app(settings=Settings(admin_token=""), storage=storage)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def guarded_client(storage):
    """Client for an app that requires ``ADMIN_TOKEN`` to list inquiries."""
    app = create_app(settings=Settings(admin_token=ADMIN_TOKEN), storage=storage)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def valid_payload() -> dict:
    return {
        "name": "Al",
        "email": "a@b.com",
        "serviceType": "repair",
        "message": "My brakes squeal loudly",
    }
