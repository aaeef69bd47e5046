"""Domain entities."""

from authtest.domain.entities.run_config import (
    STORAGE_API_BASE,
    STORAGE_CALLBACK,
    STORAGE_FRONTEND,
    RunConfig,
)

__all__ = [
    "RunConfig",
    "STORAGE_API_BASE",
    "STORAGE_CALLBACK",
    "STORAGE_FRONTEND",
]
