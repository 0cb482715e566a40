"""Application settings using pydantic-settings.

Settings can be overridden via environment variables with the
appropriate prefix.

Environment Variables:
    DISKKIT_SANITIZER_TABLE_FILE: YAML file with extra disposition rules
    DISKKIT_SANITIZER_REPLACE_CONTROL_CHARACTERS: Also replace control characters
    DISKKIT_WORKSPACE_ROOT: Base directory for testing workspaces
    DISKKIT_LOG_VERBOSE: Enable debug logging
    DISKKIT_LOG_JSON_OUTPUT: Emit JSON log lines
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from diskkit.config.defaults import (
    DEFAULT_LOG_JSON,
    DEFAULT_LOG_VERBOSE,
    DEFAULT_REPLACE_CONTROL_CHARACTERS,
    DEFAULT_TABLE_FILE,
    DEFAULT_WORKSPACE_ROOT,
)
from diskkit.exceptions import ConfigurationError

__all__ = [
    "SanitizerSettings",
    "WorkspaceSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]


class SanitizerSettings(BaseSettings):
    """Settings for the basename sanitizer.

    Attributes:
        table_file: Optional YAML file whose rules are layered over the
            built-in table.
        replace_control_characters: Start from the hardened table, which
            also replaces control characters with a space.

    """

    model_config = SettingsConfigDict(
        env_prefix="DISKKIT_SANITIZER_",
        extra="ignore",
    )

    table_file: Path | None = Field(
        default=DEFAULT_TABLE_FILE,
        description="YAML file with extra disposition rules",
    )
    replace_control_characters: bool = Field(
        default=DEFAULT_REPLACE_CONTROL_CHARACTERS,
        description="Replace control characters with a space",
    )


class WorkspaceSettings(BaseSettings):
    """Settings for testing workspaces.

    Attributes:
        root: Directory under which the testing workspace folder lives.

    """

    model_config = SettingsConfigDict(
        env_prefix="DISKKIT_WORKSPACE_",
        extra="ignore",
    )

    root: Path = Field(
        default=Path(DEFAULT_WORKSPACE_ROOT),
        description="Base directory for testing workspaces",
    )


class LoggingSettings(BaseSettings):
    """Settings for structured logging."""

    model_config = SettingsConfigDict(
        env_prefix="DISKKIT_LOG_",
        extra="ignore",
    )

    verbose: bool = Field(default=DEFAULT_LOG_VERBOSE)
    json_output: bool = Field(default=DEFAULT_LOG_JSON)


class Settings(BaseSettings):
    """Root settings container.

    Use get_settings() to access the cached singleton instance.

    Attributes:
        sanitizer: Sanitizer settings.
        workspace: Testing workspace settings.
        logging: Logging settings.

    """

    model_config = SettingsConfigDict(
        env_prefix="DISKKIT_",
        extra="ignore",
    )

    sanitizer: SanitizerSettings = Field(default_factory=SanitizerSettings)
    workspace: WorkspaceSettings = Field(default_factory=WorkspaceSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings singleton.

    Returns:
        The Settings instance with values from environment variables.

    Raises:
        ConfigurationError: If a DISKKIT_* variable holds an invalid value.

    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid DISKKIT_* environment settings: {e}") from e
