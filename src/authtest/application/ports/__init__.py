"""Application ports - interfaces for external adapters."""

from authtest.application.ports.backend_api import BackendApi

__all__ = ["BackendApi"]
