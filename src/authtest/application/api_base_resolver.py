"""Resolve which AquaView API base a proxied request targets."""

from authtest.domain.exceptions import MissingApiBase
from authtest.domain.value_objects import ApiBase


class ApiBaseResolver:
    """Per-request override wins; otherwise the configured AQUAVIEW_API_BASE."""

    def __init__(self, default: str | None = None) -> None:
        self._default = (default or "").strip()

    @property
    def has_default(self) -> bool:
        return bool(self._default)

    def resolve(self, override: str | None = None) -> ApiBase:
        """Return the normalized base.

        Raises MissingApiBase when neither value is set and InvalidUrl when
        the chosen value is not an absolute http(s) URL.
        """
        candidate = override.strip() if isinstance(override, str) else ""
        candidate = candidate or self._default
        if not candidate:
            raise MissingApiBase()
        return ApiBase.parse(candidate)
