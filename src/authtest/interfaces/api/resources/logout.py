"""Logout proxy resource."""

import falcon.asgi

from authtest.application.use_cases.proxy.logout import LogoutUseCase
from authtest.domain.exceptions import AuthTestError
from authtest.interfaces.api.resources.common import (
    read_json_object,
    send_backend_response,
    send_error,
)


class LogoutResource:
    """POST /api/logout - forward to <apiBase>/api/auth/logout."""

    def __init__(self, logout: LogoutUseCase) -> None:
        self._logout = logout

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Log out; a missing or unparsable body counts as {}."""
        body = await read_json_object(req) or {}
        api_base = body.get("apiBase")
        try:
            result = await self._logout.execute(api_base if isinstance(api_base, str) else None)
        except AuthTestError as e:
            send_error(resp, e)
            return

        send_backend_response(resp, result)
