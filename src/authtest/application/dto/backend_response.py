"""Downstream response DTO."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BackendResponse:
    """Status and JSON payload returned by the AquaView API, passed through as-is."""

    status_code: int
    payload: dict[str, Any] | list[Any]
