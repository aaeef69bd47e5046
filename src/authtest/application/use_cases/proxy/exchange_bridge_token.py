"""Exchange bridge token use case."""

import logging

from authtest.application.api_base_resolver import ApiBaseResolver
from authtest.application.dto.backend_response import BackendResponse
from authtest.application.ports import BackendApi
from authtest.domain.exceptions import MissingField
from authtest.domain.value_objects import preview_token

logger = logging.getLogger(__name__)


class ExchangeBridgeTokenUseCase:
    """Trade a bridge token for the user session payload on the AquaView API."""

    def __init__(self, backend: BackendApi, api_base_resolver: ApiBaseResolver) -> None:
        self._backend = backend
        self._resolver = api_base_resolver

    async def execute(self, token: object, api_base: str | None = None) -> BackendResponse:
        """Validate the token before resolving the base, so a blank token never leaves the server."""
        token = token.strip() if isinstance(token, str) else ""
        if not token:
            raise MissingField("token is required")

        base = self._resolver.resolve(api_base)
        logger.info("Exchanging bridge token %s against %s", preview_token(token), base)
        return await self._backend.exchange_bridge_token(base, token)
