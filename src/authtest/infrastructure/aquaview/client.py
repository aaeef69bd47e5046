"""AquaView API client over httpx."""

import json
import logging
from typing import Any

import httpx

from authtest.application.dto.backend_response import BackendResponse
from authtest.domain.exceptions import UpstreamUnavailable
from authtest.domain.value_objects import ApiBase

logger = logging.getLogger(__name__)

EXCHANGE_PATH = "/api/auth/bridge/exchange"
LOGOUT_PATH = "/api/auth/logout"
STATUS_PATH = "/status"

EXCHANGE_FAILED = "Bridge exchange failed."
LOGOUT_FAILED = "Logout failed."
STATUS_FAILED = "Status check failed."


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unsupported JSON constant {name}")


def decode_payload(text: str, default_detail: str) -> dict[str, Any] | list[Any]:
    """Turn a downstream body into something safe to return as JSON.

    Empty bodies become {}, objects and arrays pass through, everything else
    (scalars, null, non-JSON text) is wrapped as {"detail": ...}.
    """
    if not text:
        return {}
    try:
        data: Any = json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        data = text or default_detail
    if not isinstance(data, (dict, list)):
        data = {"detail": data}
    return data


class AquaViewClient:
    """BackendApi adapter: forwards harness calls to the AquaView API."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def exchange_bridge_token(self, api_base: ApiBase, token: str) -> BackendResponse:
        return await self._forward(
            "POST",
            api_base.join(EXCHANGE_PATH),
            EXCHANGE_FAILED,
            json={"token": token},
            headers={"Content-Type": "application/json", "Accept": "application/json"},
        )

    async def logout(self, api_base: ApiBase) -> BackendResponse:
        return await self._forward(
            "POST",
            api_base.join(LOGOUT_PATH),
            LOGOUT_FAILED,
            headers={"Accept": "application/json"},
        )

    async def get_status(self, api_base: ApiBase) -> BackendResponse:
        return await self._forward("GET", api_base.join(STATUS_PATH), STATUS_FAILED)

    async def _forward(
        self, method: str, url: str, default_detail: str, **kwargs: Any
    ) -> BackendResponse:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, url, e, exc_info=True)
            raise UpstreamUnavailable(default_detail, str(e) or type(e).__name__) from e

        logger.info("%s %s -> %d", method, url, response.status_code)
        return BackendResponse(
            status_code=response.status_code,
            payload=decode_payload(response.text, default_detail),
        )
