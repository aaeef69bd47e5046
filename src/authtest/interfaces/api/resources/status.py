"""Status proxy resource."""

import falcon.asgi

from authtest.application.use_cases.proxy.check_status import CheckStatusUseCase
from authtest.domain.exceptions import AuthTestError
from authtest.interfaces.api.resources.common import send_backend_response, send_error


class StatusResource:
    """GET /api/status?apiBase=... - forward to <apiBase>/status."""

    def __init__(self, check_status: CheckStatusUseCase) -> None:
        self._check_status = check_status

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        override = req.get_param("apiBase") or req.get_param("api_base") or ""
        try:
            result = await self._check_status.execute(override)
        except AuthTestError as e:
            send_error(resp, e)
            return

        send_backend_response(resp, result)
