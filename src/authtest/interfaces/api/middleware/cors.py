"""Cross-origin access to the harness for browsers served from elsewhere."""

import falcon
import falcon.asgi

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Max-Age": "86400",
}


class CORSMiddleware:
    """Let the configured origins call the proxy endpoints from their own pages.

    An empty origin list leaves responses untouched, so the proxies stay
    reachable only from the harness pages themselves. A request from an
    unlisted origin is answered with the first configured origin, which the
    browser then refuses.
    """

    def __init__(self, origins: list[str]) -> None:
        self._origins = origins

    def allowed_origin(self, origin: str | None) -> str | None:
        if not self._origins:
            return None
        return origin if origin in self._origins else self._origins[0]

    def _apply(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        allowed = self.allowed_origin(req.get_header("Origin"))
        if allowed is None:
            return
        resp.set_header("Access-Control-Allow-Origin", allowed)
        resp.set_header("Vary", "Origin")
        resp.set_headers(PREFLIGHT_HEADERS)

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Short-circuit OPTIONS so preflights never reach a proxy resource."""
        self._apply(req, resp)
        if req.method == "OPTIONS":
            resp.status = falcon.HTTP_200
            resp.media = {}
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        # A responder may have overwritten the headers set in process_request.
        self._apply(req, resp)
