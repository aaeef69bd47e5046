"""Bridge exchange proxy resource."""

import falcon
import falcon.asgi

from authtest.application.use_cases.proxy.exchange_bridge_token import (
    ExchangeBridgeTokenUseCase,
)
from authtest.domain.exceptions import AuthTestError
from authtest.interfaces.api.resources.common import (
    read_json_object,
    send_backend_response,
    send_detail,
    send_error,
)


class BridgeExchangeResource:
    """POST /api/bridge-exchange - forward to <apiBase>/api/auth/bridge/exchange."""

    def __init__(self, exchange_bridge_token: ExchangeBridgeTokenUseCase) -> None:
        self._exchange = exchange_bridge_token

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Exchange the token from the body {token, apiBase?}."""
        body = await read_json_object(req)
        if body is None:
            send_detail(resp, falcon.HTTP_400, "Invalid JSON payload")
            return

        api_base = body.get("apiBase")
        try:
            result = await self._exchange.execute(
                body.get("token"),
                api_base if isinstance(api_base, str) else None,
            )
        except AuthTestError as e:
            send_error(resp, e)
            return

        send_backend_response(resp, result)
