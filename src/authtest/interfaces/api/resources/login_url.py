"""Login URL preview resource."""

import falcon
import falcon.asgi

from authtest.application.use_cases.login.prepare_login_test import PrepareLoginTestUseCase
from authtest.domain.exceptions import ValidationError
from authtest.interfaces.api.resources.common import read_json_object, send_detail


def _text(value: object) -> str:
    return value if isinstance(value, str) else ""


class LoginUrlResource:
    """POST /api/login-url - compute the redirect chain for the start page."""

    def __init__(self, prepare_login_test: PrepareLoginTestUseCase) -> None:
        self._prepare = prepare_login_test

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Body {frontendUrl, callbackUrl, apiBase?} -> URLs plus session storage entries."""
        body = await read_json_object(req)
        if body is None:
            send_detail(resp, falcon.HTTP_400, "Invalid JSON payload")
            return

        try:
            plan = self._prepare.execute(
                _text(body.get("frontendUrl")),
                _text(body.get("callbackUrl")),
                _text(body.get("apiBase")),
            )
        except ValidationError as e:
            send_detail(resp, falcon.HTTP_400, str(e))
            return

        resp.media = {**plan.redirect.as_dict(), "storage": plan.run_config.storage_items()}
        resp.status = falcon.HTTP_200
