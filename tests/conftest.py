"""Pytest fixtures for authtest tests."""

from unittest.mock import AsyncMock

import pytest

from authtest.application.api_base_resolver import ApiBaseResolver
from authtest.application.dto.backend_response import BackendResponse
from authtest.config import Settings

from tests.fakes import FakeAquaView

AQUAVIEW_API_BASE = "https://aquaview.test/"


@pytest.fixture
def settings() -> Settings:
    """Settings with a default API base and no .env lookup."""
    return Settings(_env_file=None, aquaview_api_base=AQUAVIEW_API_BASE)


@pytest.fixture
def fake_aquaview() -> FakeAquaView:
    return FakeAquaView()


@pytest.fixture
def resolver() -> ApiBaseResolver:
    return ApiBaseResolver(AQUAVIEW_API_BASE)


@pytest.fixture
def mock_backend():
    """AsyncMock for BackendApi - every call answers 200 {}."""
    mock = AsyncMock()
    ok = BackendResponse(status_code=200, payload={})
    mock.exchange_bridge_token.return_value = ok
    mock.logout.return_value = ok
    mock.get_status.return_value = ok
    return mock


def pytest_collection_modifyitems(items: list) -> None:
    """Run e2e tests last so Playwright's event loop does not break sync Falcon tests."""
    e2e, other = [], []
    for item in items:
        if "/e2e/" in item.nodeid or "\\e2e\\" in item.nodeid:
            e2e.append(item)
        else:
            other.append(item)
    if e2e:
        items[:] = other + e2e
