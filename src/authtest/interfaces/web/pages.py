"""HTML pages for the login test flow."""

from pathlib import Path
from typing import Any

import falcon
import falcon.asgi
from jinja2 import Environment, PackageLoader, select_autoescape

from authtest import __version__
from authtest.application.use_cases.login.prepare_login_test import (
    LoginTestPlan,
    PrepareLoginTestUseCase,
)
from authtest.domain.entities import STORAGE_API_BASE, STORAGE_CALLBACK, STORAGE_FRONTEND
from authtest.domain.exceptions import ValidationError

STATIC_DIR = Path(__file__).parent / "static"


def create_template_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("authtest.interfaces.web", "templates"),
        autoescape=select_autoescape(["html"]),
    )
    env.globals.update(
        version=__version__,
        storage_keys={
            "frontend": STORAGE_FRONTEND,
            "callback": STORAGE_CALLBACK,
            "api_base": STORAGE_API_BASE,
        },
    )
    return env


def _render(env: Environment, resp: falcon.asgi.Response, name: str, **context: Any) -> None:
    resp.content_type = falcon.MEDIA_HTML
    resp.text = env.get_template(name).render(**context)
    resp.status = falcon.HTTP_200


class StartPage:
    """GET / - test configuration form and computed redirect preview.

    ``frontend_url``, ``callback_url`` and ``api_base`` query parameters
    prefill the form, and the preview is rendered server-side when they
    produce a valid redirect chain.
    """

    def __init__(
        self,
        templates: Environment,
        prepare_login_test: PrepareLoginTestUseCase,
        default_callback_url: str,
    ) -> None:
        self._templates = templates
        self._prepare = prepare_login_test
        self._default_callback_url = default_callback_url

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        frontend_url = req.get_param("frontend_url") or ""
        callback_url = req.get_param("callback_url") or self._default_callback_url
        api_base = req.get_param("api_base") or ""

        plan: LoginTestPlan | None = None
        if frontend_url.strip() and callback_url.strip():
            try:
                plan = self._prepare.execute(frontend_url, callback_url, api_base)
            except ValidationError:
                plan = None

        _render(
            self._templates,
            resp,
            "start.html",
            frontend_url=frontend_url,
            callback_url=callback_url,
            api_base=api_base,
            redirect=plan.redirect if plan else None,
        )


class CallbackPage:
    """GET /callback - reads #bridge_token in the browser and exchanges it."""

    def __init__(self, templates: Environment) -> None:
        self._templates = templates

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        _render(self._templates, resp, "callback.html")


class StatusPage:
    """GET /status - runs the proxied /status check on demand."""

    def __init__(self, templates: Environment) -> None:
        self._templates = templates

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        _render(self._templates, resp, "status.html")
