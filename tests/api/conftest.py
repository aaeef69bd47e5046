"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from authtest.config import Settings
from authtest.main import create_authtest_app


@pytest.fixture
def app(settings, fake_aquaview):
    """Falcon ASGI app wired to the in-memory AquaView API."""
    return create_authtest_app(settings, backend=fake_aquaview.client())


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def unconfigured_client(fake_aquaview) -> TestClient:
    """Client for an app without AQUAVIEW_API_BASE."""
    settings = Settings(_env_file=None, aquaview_api_base="")
    return TestClient(create_authtest_app(settings, backend=fake_aquaview.client()))
