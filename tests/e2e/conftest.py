"""E2E test fixtures. Requires: playwright install chromium.

The harness runs in a background uvicorn server whose AquaView API is the
in-memory FakeAquaView, so no external services are needed.
"""

import socket
import threading
import time

import pytest
import uvicorn

from authtest.config import Settings
from authtest.main import create_authtest_app

from tests.fakes import FakeAquaView


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture(scope="session")
def aquaview() -> FakeAquaView:
    return FakeAquaView()


@pytest.fixture(scope="session")
def base_url(aquaview: FakeAquaView):
    """Harness base URL."""
    settings = Settings(_env_file=None, aquaview_api_base="https://aquaview.test")
    app = create_authtest_app(settings, backend=aquaview.client())
    port = _free_port()
    server = uvicorn.Server(
        uvicorn.Config(app, host="127.0.0.1", port=port, log_level="warning", lifespan="off")
    )
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline:
            raise RuntimeError("authtest server did not start")
        time.sleep(0.05)

    yield f"http://127.0.0.1:{port}"

    server.should_exit = True
    thread.join(timeout=5)
