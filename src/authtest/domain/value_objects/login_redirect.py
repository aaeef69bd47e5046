"""Nested login redirect chain: login -> auth/bridge -> callback."""

from dataclasses import dataclass
from urllib.parse import SplitResult, parse_qsl, quote, quote_plus, urlencode

from authtest.domain.value_objects.api_base import (
    ApiBase,
    normalize_url,
    parse_absolute_url,
    serialize_url,
)

API_BASE_PARAM = "api_base"


def encode_uri_component(value: str) -> str:
    """Percent-encode like JavaScript encodeURIComponent."""
    return quote(value, safe="!~*'()")


def form_quote(
    value: str, safe: str = "", encoding: str | None = None, errors: str | None = None
) -> str:
    """Percent-encode a query value like URLSearchParams: '*' stays, '~' is escaped."""
    return quote_plus(value, safe="*", encoding=encoding, errors=errors).replace("~", "%7E")


def _set_query_param(parts: SplitResult, name: str, value: str) -> SplitResult:
    """Replace the first `name` param in place (dropping repeats) or append it."""
    params: list[tuple[str, str]] = []
    placed = False
    for key, current in parse_qsl(parts.query, keep_blank_values=True):
        if key == name:
            if not placed:
                params.append((key, value))
                placed = True
            continue
        params.append((key, current))
    if not placed:
        params.append((name, value))
    return parts._replace(query=urlencode(params, quote_via=form_quote))


@dataclass(frozen=True)
class LoginRedirect:
    """URLs computed for one login test run."""

    login_url: str
    redirect_to: str
    callback_url_with_params: str
    frontend_base: str

    def as_dict(self) -> dict[str, str]:
        return {
            "loginUrl": self.login_url,
            "redirectTo": self.redirect_to,
            "callbackUrlWithParams": self.callback_url_with_params,
            "frontendBase": self.frontend_base,
        }


def build_login_redirect(
    frontend_url: str,
    callback_url: str,
    api_base: str | None = None,
) -> LoginRedirect:
    """Build the login URL that ends on the callback page.

    The callback gets ``api_base`` when an override is given; the callback is
    encoded into ``dest`` on ``<frontend>/auth/bridge``, which in turn is
    encoded into ``redirect_to`` on ``<frontend>/login``.
    """
    frontend = parse_absolute_url(frontend_url, "frontendUrl must be a valid URL")
    callback = parse_absolute_url(callback_url, "callbackUrl must be a valid URL")

    if api_base and api_base.strip():
        callback = _set_query_param(callback, API_BASE_PARAM, str(ApiBase.parse(api_base)))

    callback_url_with_params = serialize_url(callback)
    frontend_base = normalize_url(serialize_url(frontend))
    redirect_to = (
        f"{frontend_base}/auth/bridge?dest={encode_uri_component(callback_url_with_params)}"
    )
    login_url = f"{frontend_base}/login?redirect_to={encode_uri_component(redirect_to)}"

    return LoginRedirect(
        login_url=login_url,
        redirect_to=redirect_to,
        callback_url_with_params=callback_url_with_params,
        frontend_base=frontend_base,
    )
