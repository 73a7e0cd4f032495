"""
Configuration Settings.

This module defines the SDK configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SERVICE_URL = "https://directlink.cloud.ibm.com/v1"


class DirectLinkSettings(BaseSettings):
    """
    Direct Link client settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Service Endpoint
    # =====================================================================
    url: str = Field(
        default=DEFAULT_SERVICE_URL,
        description="Direct Link API base URL including the /v1 path",
        alias="DIRECT_LINK_URL",
    )
    version: Optional[str] = Field(
        default=None,
        description="API version date sent as the `version` query parameter (YYYY-MM-DD)",
        alias="DIRECT_LINK_VERSION",
    )
    auth_token: Optional[str] = Field(
        default=None,
        description="Authorization header value, e.g. 'Bearer <iam-access-token>'",
        alias="DIRECT_LINK_AUTH_TOKEN",
    )

    # =====================================================================
    # HTTP Behaviour
    # =====================================================================
    timeout: float = Field(
        default=60.0,
        description="Default HTTP timeout in seconds",
        alias="DIRECT_LINK_TIMEOUT",
    )
    max_retries: int = Field(
        default=0,
        ge=0,
        description="Maximum retry attempts for retryable failures (0 disables retries)",
        alias="DIRECT_LINK_MAX_RETRIES",
    )
    retry_interval: float = Field(
        default=30.0,
        ge=0,
        description="Upper bound in seconds for the exponential wait between retries",
        alias="DIRECT_LINK_RETRY_INTERVAL",
    )

    # =====================================================================
    # Logging
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="SDK logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="DIRECT_LINK_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log format used by setup_logging (simple, detailed, json)",
        alias="DIRECT_LINK_LOG_FORMAT",
    )


_settings_instance: Optional[DirectLinkSettings] = None


def get_settings() -> DirectLinkSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = DirectLinkSettings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached settings so the next ``get_settings()`` re-reads the environment."""
    global _settings_instance
    _settings_instance = None
