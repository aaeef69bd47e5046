"""Domain value objects."""

from authtest.domain.value_objects.api_base import ApiBase, normalize_url
from authtest.domain.value_objects.login_redirect import (
    LoginRedirect,
    build_login_redirect,
    encode_uri_component,
)
from authtest.domain.value_objects.token_preview import preview_token

__all__ = [
    "ApiBase",
    "LoginRedirect",
    "build_login_redirect",
    "encode_uri_component",
    "normalize_url",
    "preview_token",
]
