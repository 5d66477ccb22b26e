"""
Tests for the ``requests``-based API client.

The client is pointed at a real app through a small session adapter
that forwards ``session.request`` calls to FastAPI's ``TestClient``.
"""

from __future__ import annotations

import pytest
import requests

from jay_auto_api.app.core.errors import ValidationError
from jay_auto_client import ApiError, JayAutoAPI

from .conftest import ADMIN_TOKEN


class ForwardingSession:
    """Duck-typed stand-in for ``requests.Session``."""

    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, json=None, headers=None, timeout=None):
        self.calls.append((method, url, headers))
        return self.test_client.request(method, url, json=json, headers=headers)


class OfflineSession:
    def request(self, **kwargs):
        raise requests.ConnectionError("connection refused")


@pytest.fixture
def api(client) -> JayAutoAPI:
    return JayAutoAPI(base_url="http://testserver/", session=ForwardingSession(client))


def test_catalog_calls(api):
    assert len(api.list_services()) == 7
    assert [car["id"] for car in api.list_cars()] == ["1", "2", "3", "4", "5", "6"]
    assert all(0 <= t["rating"] <= 5 for t in api.list_testimonials())
    assert api.get_info()["name"] == "Jay Auto Repair"


def test_submit_and_list_inquiries(api):
    created = api.submit_inquiry(
        name="Al",
        email="a@b.com",
        service_type="repair",
        message="My brakes squeal loudly",
        phone="(555) 000-1111",
    )
    assert created["phone"] == "(555) 000-1111"
    assert [i["id"] for i in api.list_inquiries()] == [created["id"]]


def test_submit_inquiry_raises_validation_error(api):
    with pytest.raises(ValidationError) as excinfo:
        api.submit_inquiry(name="A", email="bad-email", service_type="", message="short")
    assert set(excinfo.value.errors) == {"name", "email", "serviceType", "message"}


def test_http_error_raises_api_error(guarded_client):
    api = JayAutoAPI(base_url="http://testserver", session=ForwardingSession(guarded_client))
    with pytest.raises(ApiError) as excinfo:
        api.list_inquiries()
    assert excinfo.value.status_code == 401


def test_api_key_is_sent_as_bearer_token(guarded_client):
    session = ForwardingSession(guarded_client)
    api = JayAutoAPI(base_url="http://testserver", api_key=ADMIN_TOKEN, session=session)

    assert api.list_inquiries() == []
    method, url, headers = session.calls[-1]
    assert url == "http://testserver/api/v1/contact"
    assert headers["Authorization"] == f"Bearer {ADMIN_TOKEN}"


def test_transport_failure_raises_api_error():
    api = JayAutoAPI(base_url="http://localhost:1", session=OfflineSession())
    with pytest.raises(ApiError) as excinfo:
        api.list_cars()
    assert excinfo.value.status_code is None
