"""Logout use case."""

import logging

from authtest.application.api_base_resolver import ApiBaseResolver
from authtest.application.dto.backend_response import BackendResponse
from authtest.application.ports import BackendApi

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """End the AquaView API session."""

    def __init__(self, backend: BackendApi, api_base_resolver: ApiBaseResolver) -> None:
        self._backend = backend
        self._resolver = api_base_resolver

    async def execute(self, api_base: str | None = None) -> BackendResponse:
        base = self._resolver.resolve(api_base)
        logger.info("Logging out against %s", base)
        return await self._backend.logout(base)
