"""Pydantic settings models for logging configuration."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from multi_target_logging.enums.logging import LogLevel


class LogSettings(BaseSettings):
    """Which sinks ``LoggingService`` wires into the standard and error groups.

    The ERROR threshold that splits the two groups is fixed and not a setting.
    """

    model_config = SettingsConfigDict(env_prefix="MTL_")

    # Minimum level written to stdout
    log_level: LogLevel = LogLevel.INFO

    # stdout carries standard records, stderr carries error records
    log_to_stdout: bool = True
    log_to_stderr: bool = True

    # Extra error-group destinations
    log_to_db: bool = False
    log_to_splunk: bool = False
    splunk_hec_url: str | None = None
    splunk_token: str | None = None
    splunk_timeout: float = Field(default=2.5, gt=0)

    # Report sink failures to stderr instead of raising into application code
    swallow_errors: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_level_name(cls, value: Any) -> Any:
        """Accept level names ("warning", "ERROR") and numeric strings as well as ints."""
        if isinstance(value, str):
            name = value.strip()
            if name.lstrip("-").isdigit():
                return int(name)
            try:
                return LogLevel[name.upper()]
            except KeyError:
                raise ValueError(f"unknown log level {value!r}") from None
        return value


class GeneralSettings(BaseSettings):
    """General settings is used when more than one setting is required to be imported into app"""

    log_settings: LogSettings = Field(default_factory=LogSettings)
