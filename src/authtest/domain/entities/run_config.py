"""Run configuration - what the start page keeps in session storage."""

from dataclasses import dataclass

from authtest.domain.value_objects import normalize_url

STORAGE_FRONTEND = "authtest_frontend"
STORAGE_CALLBACK = "authtest_callback"
STORAGE_API_BASE = "authtest_api_base"


@dataclass(frozen=True)
class RunConfig:
    """Per-tab configuration for one login test run."""

    frontend_url: str
    callback_url: str
    api_base_override: str | None = None

    @classmethod
    def from_inputs(
        cls, frontend_url: str, callback_url: str, api_base: str | None = None
    ) -> "RunConfig":
        override = normalize_url(api_base) if api_base and api_base.strip() else None
        return cls(
            frontend_url=normalize_url(frontend_url),
            callback_url=callback_url.strip(),
            api_base_override=override,
        )

    def storage_items(self) -> dict[str, str | None]:
        """Session storage writes; None means remove the key."""
        return {
            STORAGE_FRONTEND: self.frontend_url,
            STORAGE_CALLBACK: self.callback_url,
            STORAGE_API_BASE: self.api_base_override,
        }
