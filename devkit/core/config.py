"""
Configuration Management.

Settings come from DEVKIT_* environment variables and are loaded once per
invocation; there is no module-level cache so every run (and every test)
sees the current environment.

Environment:
    DEVKIT_CONFIG_DIR       - Directory holding config.json (default: $HOME/.devkit)
    DEVKIT_LOG_LEVEL        - Log level when neither --verbose nor --debug is given
    DEVKIT_LOG_FORMAT       - 'console' or 'json'
    DEVKIT_LOG_FILE         - Optional JSONL log file
    DEVKIT_REQUEST_TIMEOUT  - Request timeout in seconds (default: httpx default)
"""

import os
from pathlib import Path
from typing import Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from devkit.core.exceptions import ConfigurationError

PROFILE_DIR_NAME = ".devkit"
PROFILE_FILE_NAME = "config.json"


class CLISettings(BaseSettings):
    """CLI settings loaded from DEVKIT_* environment variables."""

    config_dir: Path | None = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["console", "json"] = "console"
    log_file: Path | None = None
    request_timeout: float | None = None

    model_config = SettingsConfigDict(
        env_prefix="DEVKIT_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


def load_settings() -> CLISettings:
    """Load settings from the environment, failing with ConfigurationError."""
    try:
        return CLISettings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid DEVKIT_* environment settings:\n{e}") from e


def resolve_profile_path(settings: CLISettings) -> Path:
    """
    Resolve the location of the profile file.

    An explicit DEVKIT_CONFIG_DIR wins. Otherwise the file lives under the
    user's home directory, which must be given by HOME.

    Raises:
        ConfigurationError: If HOME is unset and no config dir is configured
    """
    if settings.config_dir is not None:
        return settings.config_dir / PROFILE_FILE_NAME

    home = os.environ.get("HOME")
    if not home:
        raise ConfigurationError(
            "Cannot locate the profile file: HOME is not set (or set DEVKIT_CONFIG_DIR)"
        )
    return Path(home) / PROFILE_DIR_NAME / PROFILE_FILE_NAME
