"""
SystemLogger Configuration

Settings for rendering entries through the ``logging`` module, read from
environment variables with the SYSTEMLOGGER_ prefix. Loggers themselves take
no configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SystemLoggerConfig(BaseSettings):
    """
    Configuration for log rendering.

    Supports environment variables with SYSTEMLOGGER_ prefix:
    - SYSTEMLOGGER_LEVEL: minimum level shown (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - SYSTEMLOGGER_REVEAL_PRIVATE: show private payloads in clear
    - SYSTEMLOGGER_RICH: render with rich instead of a plain stream handler
    - SYSTEMLOGGER_LOG_FORMAT: format string for the plain handler
    """

    model_config = SettingsConfigDict(
        env_prefix="SYSTEMLOGGER_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Minimum level rendered by the installed handler",
    )
    reveal_private: bool = Field(
        default=False,
        description="Render private payloads instead of the placeholder",
    )
    rich: bool = Field(
        default=True,
        description="Use rich's console handler for output",
    )
    log_format: str | None = Field(
        default=None,
        description="Format string for the plain handler (uses default if not set)",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v
