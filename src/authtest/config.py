"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CALLBACK_URL = "https://authtest.mandip.dev/callback"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # AquaView API
    aquaview_api_base: str = Field(
        default="",
        description="Default AquaView API base URL when a request gives no override",
    )
    aquaview_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for each proxied AquaView call",
    )

    # Pages
    default_callback_url: str = Field(
        default=DEFAULT_CALLBACK_URL,
        description="Callback URL prefilled on the start page",
    )

    # HTTP server
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")
    cors_origins: str = Field(
        default="",
        description="Comma-separated origins allowed to call the proxy endpoints",
    )

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
