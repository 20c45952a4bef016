"""
Application Settings (Pydantic Settings).

Loads configuration from environment variables (.env file or system env).
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field can be overridden by an environment variable of the same name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # ========================================================================
    # TOOL CHAIN REGISTRY
    # ========================================================================
    CHAIN_VALUE_PAD_WIDTH: int = Field(
        default=0,
        ge=0,
        description="Pad stored chain strings to this width (0 stores exact values, 256 matches the editor buffers)",
    )

    # ========================================================================
    # LOCAL TOOLS
    # ========================================================================
    LOCAL_TOOL_TIMEOUT_SECONDS: float | None = Field(
        default=None,
        gt=0,
        description="Kill local tool processes after this many seconds (unset = no timeout)",
    )

    # ========================================================================
    # LOGGING
    # ========================================================================
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="json", pattern="^(json|text)$")

    # ========================================================================
    # DEPLOYMENT
    # ========================================================================
    ENVIRONMENT: str = Field(
        default="development", pattern="^(development|staging|production)$"
    )
