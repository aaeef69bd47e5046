"""Helpers shared by the proxy resources."""

import json
from typing import Any

import falcon
import falcon.asgi

from authtest.application.dto.backend_response import BackendResponse
from authtest.domain.exceptions import MissingApiBase, UpstreamUnavailable, ValidationError


async def read_json_object(req: falcon.asgi.Request) -> dict[str, Any] | None:
    """Return the JSON body, {} when it is not an object, None when it cannot be parsed.

    The body is decoded as JSON whatever Content-Type the caller sent, so
    ``curl -d`` style requests behave like ``fetch`` ones.
    """
    raw = await req.stream.read()
    if not raw.strip():
        return None
    try:
        body = json.loads(raw)
    except ValueError:
        return None
    return body if isinstance(body, dict) else {}


def send_backend_response(resp: falcon.asgi.Response, result: BackendResponse) -> None:
    """Pass the downstream status and payload through unchanged."""
    resp.status = falcon.code_to_http_status(result.status_code)
    resp.media = result.payload


def send_detail(resp: falcon.asgi.Response, status: str, detail: str, **extra: Any) -> None:
    resp.status = status
    resp.media = {"detail": detail, **extra}


def send_error(resp: falcon.asgi.Response, error: Exception) -> None:
    """Map a harness exception onto its HTTP status."""
    if isinstance(error, ValidationError):
        send_detail(resp, falcon.HTTP_400, str(error))
    elif isinstance(error, MissingApiBase):
        send_detail(resp, falcon.HTTP_500, str(error))
    elif isinstance(error, UpstreamUnavailable):
        send_detail(resp, falcon.HTTP_502, error.detail, error=error.error)
    else:
        raise error
