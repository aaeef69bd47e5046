"""Health check endpoint."""

import falcon
import falcon.asgi

from authtest.application.api_base_resolver import ApiBaseResolver


class HealthResource:
    """Liveness plus whether a default API base is configured."""

    def __init__(self, api_base_resolver: ApiBaseResolver) -> None:
        self._resolver = api_base_resolver

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /health."""
        resp.media = {"status": "ok", "api_base_configured": self._resolver.has_default}
        resp.status = falcon.HTTP_200
