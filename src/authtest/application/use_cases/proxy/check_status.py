"""Status check use case."""

from authtest.application.api_base_resolver import ApiBaseResolver
from authtest.application.dto.backend_response import BackendResponse
from authtest.application.ports import BackendApi


class CheckStatusUseCase:
    """GET /status on the AquaView API."""

    def __init__(self, backend: BackendApi, api_base_resolver: ApiBaseResolver) -> None:
        self._backend = backend
        self._resolver = api_base_resolver

    async def execute(self, api_base: str | None = None) -> BackendResponse:
        return await self._backend.get_status(self._resolver.resolve(api_base))
