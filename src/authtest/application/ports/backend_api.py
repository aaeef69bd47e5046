"""AquaView API port."""

from typing import Protocol

from authtest.application.dto.backend_response import BackendResponse
from authtest.domain.value_objects import ApiBase


class BackendApi(Protocol):
    """Port for the three AquaView API calls the harness proxies."""

    async def exchange_bridge_token(self, api_base: ApiBase, token: str) -> BackendResponse: ...

    async def logout(self, api_base: ApiBase) -> BackendResponse: ...

    async def get_status(self, api_base: ApiBase) -> BackendResponse: ...
