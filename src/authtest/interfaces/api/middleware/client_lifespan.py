"""Client lifespan middleware - closes the AquaView HTTP client on shutdown."""

from typing import Any, Protocol


class _Closeable(Protocol):
    async def aclose(self) -> None: ...


class ClientLifespanMiddleware:
    """Middleware that releases the pooled HTTP connections when the ASGI server stops."""

    def __init__(self, client: _Closeable) -> None:
        self._client = client

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close client when ASGI server shuts down."""
        await self._client.aclose()
