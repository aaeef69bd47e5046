"""Application entry point and composition root."""

import argparse
import logging
import sys

import falcon
import falcon.asgi

from authtest import __version__
from authtest.application.api_base_resolver import ApiBaseResolver
from authtest.application.ports import BackendApi
from authtest.application.use_cases.login.prepare_login_test import PrepareLoginTestUseCase
from authtest.application.use_cases.proxy.check_status import CheckStatusUseCase
from authtest.application.use_cases.proxy.exchange_bridge_token import (
    ExchangeBridgeTokenUseCase,
)
from authtest.application.use_cases.proxy.logout import LogoutUseCase
from authtest.config import Settings, get_settings
from authtest.domain.exceptions import ValidationError
from authtest.infrastructure.aquaview import AquaViewClient
from authtest.interfaces.api.middleware.client_lifespan import ClientLifespanMiddleware
from authtest.interfaces.api.middleware.cors import CORSMiddleware
from authtest.interfaces.api.resources.bridge_exchange import BridgeExchangeResource
from authtest.interfaces.api.resources.health import HealthResource
from authtest.interfaces.api.resources.login_url import LoginUrlResource
from authtest.interfaces.api.resources.logout import LogoutResource
from authtest.interfaces.api.resources.status import StatusResource
from authtest.interfaces.web.pages import (
    STATIC_DIR,
    CallbackPage,
    StartPage,
    StatusPage,
    create_template_environment,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_authtest_app(
    settings: Settings | None = None,
    backend: BackendApi | None = None,
) -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings)
    backend = backend or AquaViewClient(timeout=settings.aquaview_timeout)
    resolver = ApiBaseResolver(settings.aquaview_api_base)

    exchange_bridge_token = ExchangeBridgeTokenUseCase(backend, resolver)
    logout = LogoutUseCase(backend, resolver)
    check_status = CheckStatusUseCase(backend, resolver)
    prepare_login_test = PrepareLoginTestUseCase()
    templates = create_template_environment()

    middleware: list[object] = [CORSMiddleware(settings.cors_origin_list)]
    if hasattr(backend, "aclose"):
        middleware.append(ClientLifespanMiddleware(backend))
    app = falcon.asgi.App(middleware=middleware)

    async def log_exception(req, resp, ex, params):
        logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
        resp.status = falcon.HTTP_500
        resp.media = {"detail": "Internal Server Error"}

    app.add_error_handler(Exception, log_exception)

    app.add_route("/", StartPage(templates, prepare_login_test, settings.default_callback_url))
    app.add_route("/callback", CallbackPage(templates))
    app.add_route("/status", StatusPage(templates))
    app.add_static_route("/static", str(STATIC_DIR))

    app.add_route("/health", HealthResource(resolver))
    app.add_route("/api/bridge-exchange", BridgeExchangeResource(exchange_bridge_token))
    app.add_route("/api/logout", LogoutResource(logout))
    app.add_route("/api/status", StatusResource(check_status))
    app.add_route("/api/login-url", LoginUrlResource(prepare_login_test))

    if not resolver.has_default:
        logger.warning("AQUAVIEW_API_BASE is not set; proxy calls need an apiBase override")
    return app


def run_server(host: str, port: int, reload: bool = False) -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "authtest.main:create_authtest_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def print_login_url(frontend_url: str, callback_url: str, api_base: str | None) -> int:
    try:
        plan = PrepareLoginTestUseCase().execute(frontend_url, callback_url, api_base)
    except ValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    print(f"callback:    {plan.redirect.callback_url_with_params}")
    print(f"redirect_to: {plan.redirect.redirect_to}")
    print(f"login URL:   {plan.redirect.login_url}")
    return 0


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="authtest",
        description="AquaView bridge-token SSO test harness",
    )
    parser.add_argument("--version", action="version", version=f"authtest {__version__}")
    commands = parser.add_subparsers(dest="command")

    serve = commands.add_parser("serve", help="Run the harness web server")
    serve.add_argument("--host", default=settings.host, help="Bind address")
    serve.add_argument("--port", type=int, default=settings.port, help="Bind port")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")

    login_url = commands.add_parser("login-url", help="Print the login redirect chain")
    login_url.add_argument("--frontend", required=True, help="AquaView frontend URL")
    login_url.add_argument(
        "--callback", default=settings.default_callback_url, help="Hyperion callback URL"
    )
    login_url.add_argument("--api-base", default=None, help="AquaView API base override")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    settings = get_settings()
    configure_logging(settings)
    args = build_parser(settings).parse_args(argv)

    if args.command == "login-url":
        return print_login_url(args.frontend, args.callback, args.api_base)

    if args.command == "serve":
        run_server(args.host, args.port, reload=args.reload)
        return 0

    print(f"authtest v{__version__}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
