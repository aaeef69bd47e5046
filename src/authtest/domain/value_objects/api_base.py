"""API base URL value object and URL helpers."""

from dataclasses import dataclass
from urllib.parse import SplitResult, urlsplit, urlunsplit

from authtest.domain.exceptions import InvalidUrl

ALLOWED_SCHEMES = ("http", "https")
DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize_url(value: str) -> str:
    """Trim whitespace and drop a single trailing slash."""
    value = value.strip()
    return value[:-1] if value.endswith("/") else value


def parse_absolute_url(value: str, message: str = "apiBase must be a valid URL") -> SplitResult:
    """Split an absolute http(s) URL, raising InvalidUrl for anything else."""
    candidate = value.strip()
    if not candidate or any(ch.isspace() for ch in candidate):
        raise InvalidUrl(message)
    try:
        parts = urlsplit(candidate)
        # Accessing .port validates it
        parts.port
    except ValueError:
        raise InvalidUrl(message) from None
    if parts.scheme.lower() not in ALLOWED_SCHEMES or not parts.hostname:
        raise InvalidUrl(message)
    return parts


def _serialize_netloc(parts: SplitResult, scheme: str) -> str:
    """Lowercase the host and drop the port when it is the scheme's default."""
    host = (parts.hostname or "").lower()
    if ":" in host:
        host = f"[{host}]"
    if parts.port is not None and parts.port != DEFAULT_PORTS.get(scheme):
        host = f"{host}:{parts.port}"
    userinfo, at, _ = parts.netloc.rpartition("@")
    return f"{userinfo}@{host}" if at else host


def serialize_url(parts: SplitResult) -> str:
    """Serialize like a browser URL parser.

    The scheme and host are lowercased, a default port (80 for http, 443 for
    https) is dropped and an empty path becomes '/'.
    """
    scheme = parts.scheme.lower()
    return urlunsplit(
        (scheme, _serialize_netloc(parts, scheme), parts.path or "/", parts.query, parts.fragment)
    )


@dataclass(frozen=True)
class ApiBase:
    """Normalized root URL of the AquaView API."""

    value: str

    @classmethod
    def parse(cls, raw: str) -> "ApiBase":
        return cls(normalize_url(serialize_url(parse_absolute_url(raw))))

    def join(self, path: str) -> str:
        """Append a downstream path such as '/status'."""
        return f"{self.value}{path}"

    def __str__(self) -> str:
        return self.value
