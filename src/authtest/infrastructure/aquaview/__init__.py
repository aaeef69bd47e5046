"""AquaView API adapter."""

from authtest.infrastructure.aquaview.client import AquaViewClient

__all__ = ["AquaViewClient"]
