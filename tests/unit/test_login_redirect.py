"""Unit tests for the login redirect chain."""

from urllib.parse import parse_qs, urlsplit

import pytest

from authtest.domain.exceptions import InvalidUrl
from authtest.domain.value_objects import build_login_redirect, encode_uri_component
from authtest.domain.value_objects.login_redirect import form_quote


def test_build_login_redirect_nests_all_three_urls() -> None:
    redirect = build_login_redirect(
        "https://x.test", "https://y.test/callback", "https://api.test/"
    )

    assert redirect.frontend_base == "https://x.test"
    assert redirect.callback_url_with_params == (
        "https://y.test/callback?api_base=https%3A%2F%2Fapi.test"
    )
    assert redirect.redirect_to == (
        "https://x.test/auth/bridge?dest="
        "https%3A%2F%2Fy.test%2Fcallback%3Fapi_base%3Dhttps%253A%252F%252Fapi.test"
    )
    assert redirect.login_url == (
        "https://x.test/login?redirect_to="
        "https%3A%2F%2Fx.test%2Fauth%2Fbridge%3Fdest%3D"
        "https%253A%252F%252Fy.test%252Fcallback%253Fapi_base%253D"
        "https%25253A%25252F%25252Fapi.test"
    )


def test_build_login_redirect_decodes_back_to_callback() -> None:
    redirect = build_login_redirect(
        "https://x.test/", "https://y.test/callback", "https://api.test/"
    )
    redirect_to = parse_qs(urlsplit(redirect.login_url).query)["redirect_to"][0]
    assert redirect_to == redirect.redirect_to
    dest = parse_qs(urlsplit(redirect_to).query)["dest"][0]
    assert dest == redirect.callback_url_with_params
    assert parse_qs(urlsplit(dest).query)["api_base"] == ["https://api.test"]


def test_build_login_redirect_without_override() -> None:
    redirect = build_login_redirect("https://x.test", "https://y.test/callback")
    assert redirect.callback_url_with_params == "https://y.test/callback"
    assert redirect.redirect_to == (
        "https://x.test/auth/bridge?dest=https%3A%2F%2Fy.test%2Fcallback"
    )


def test_build_login_redirect_blank_override_is_ignored() -> None:
    redirect = build_login_redirect("https://x.test", "https://y.test/callback", "   ")
    assert "api_base" not in redirect.callback_url_with_params


def test_build_login_redirect_replaces_existing_api_base() -> None:
    redirect = build_login_redirect(
        "https://x.test",
        "https://y.test/callback?mode=debug&api_base=old&api_base=older",
        "https://api.test",
    )
    assert redirect.callback_url_with_params == (
        "https://y.test/callback?mode=debug&api_base=https%3A%2F%2Fapi.test"
    )


def test_build_login_redirect_callback_without_path() -> None:
    redirect = build_login_redirect("https://x.test", "https://y.test")
    assert redirect.callback_url_with_params == "https://y.test/"


@pytest.mark.parametrize(
    ("frontend", "callback", "api_base", "message"),
    [
        ("x.test", "https://y.test/callback", None, "frontendUrl must be a valid URL"),
        ("https://x.test", "/callback", None, "callbackUrl must be a valid URL"),
        ("https://x.test", "https://y.test/callback", "nope", "apiBase must be a valid URL"),
    ],
)
def test_build_login_redirect_invalid(frontend, callback, api_base, message) -> None:
    with pytest.raises(InvalidUrl, match=message):
        build_login_redirect(frontend, callback, api_base)


def test_encode_uri_component_keeps_javascript_safe_set() -> None:
    assert encode_uri_component("a-b_c.d!e~f*g'h(i)j") == "a-b_c.d!e~f*g'h(i)j"
    assert encode_uri_component("a b/c?d=e&f#g") == "a%20b%2Fc%3Fd%3De%26f%23g"
    assert encode_uri_component("é") == "%C3%A9"


def test_build_login_redirect_reencodes_callback_query_like_a_browser() -> None:
    redirect = build_login_redirect(
        "https://x.test", "https://y.test/callback?q=a*b~c%20d", "https://api.test"
    )
    assert redirect.callback_url_with_params == (
        "https://y.test/callback?q=a*b%7Ec+d&api_base=https%3A%2F%2Fapi.test"
    )


def test_form_quote_matches_url_search_params() -> None:
    assert form_quote("a*b~c") == "a*b%7Ec"
    assert form_quote("-._ /") == "-._+%2F"
    assert form_quote("é") == "%C3%A9"
