from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_BODY_BYTES = 1 << 20


class DiscoverySettings(BaseSettings):
    """Settings for protected resource metadata discovery.

    All settings can be configured via environment variables with the prefix PRM_.
    For example, PRM_MAX_BODY_BYTES=65536 limits metadata documents to 64 KiB.
    """

    model_config = SettingsConfigDict(
        env_prefix="PRM_",
        env_file=".env",
        extra="ignore",
    )

    max_body_bytes: int = Field(
        DEFAULT_MAX_BODY_BYTES,
        gt=0,
        description="Largest metadata document accepted, in bytes",
    )
    http_timeout: float = Field(
        30.0,
        gt=0,
        description="Timeout applied by create_prm_http_client; injected clients keep their own",
    )
    follow_redirects: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


def get_settings() -> DiscoverySettings:
    return DiscoverySettings()
