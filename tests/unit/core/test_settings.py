"""
Unit Tests for CLI Settings.

Settings are read from DEVKIT_* environment variables; the root conftest
clears them and points HOME at a temporary directory.
"""

from pathlib import Path

import pytest

from devkit.core.config import CLISettings, load_settings, resolve_profile_path
from devkit.core.exceptions import ConfigurationError


class TestLoadSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings.config_dir is None
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"
        assert settings.log_file is None
        assert settings.request_timeout is None

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("DEVKIT_CONFIG_DIR", str(tmp_path / "cfg"))
        monkeypatch.setenv("DEVKIT_LOG_LEVEL", "debug")
        monkeypatch.setenv("DEVKIT_LOG_FORMAT", "json")
        monkeypatch.setenv("DEVKIT_REQUEST_TIMEOUT", "2.5")

        settings = load_settings()

        assert settings.config_dir == tmp_path / "cfg"
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"
        assert settings.request_timeout == 2.5

    def test_invalid_value_raises_configuration_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEVKIT_REQUEST_TIMEOUT", "soon")

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings()

        assert "DEVKIT_" in exc_info.value.message

    def test_unknown_log_level_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEVKIT_LOG_LEVEL", "chatty")

        with pytest.raises(ConfigurationError):
            load_settings()


class TestResolveProfilePath:
    """Tests for profile file location."""

    def test_defaults_to_home(self, isolated_env: Path) -> None:
        path = resolve_profile_path(CLISettings())
        assert path == isolated_env / ".devkit" / "config.json"

    def test_explicit_config_dir_wins(self, tmp_path: Path) -> None:
        path = resolve_profile_path(CLISettings(config_dir=tmp_path / "elsewhere"))
        assert path == tmp_path / "elsewhere" / "config.json"

    def test_missing_home_is_configuration_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("HOME")

        with pytest.raises(ConfigurationError) as exc_info:
            resolve_profile_path(CLISettings())

        assert "HOME" in exc_info.value.message

    def test_empty_home_is_configuration_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", "")

        with pytest.raises(ConfigurationError):
            resolve_profile_path(CLISettings())
