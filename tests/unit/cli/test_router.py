"""Unit tests for the command router."""

from pathlib import Path

import pytest
import typer
from pydantic import JsonValue

from devkit.cli.main import app
from devkit.cli.router import CLIState, api_path, execute, resolve_profile
from devkit.core.config import CLISettings
from devkit.core.exceptions import ConfigurationError
from devkit.core.profiles import Profile, ProfileStore


def _context(state: CLIState) -> typer.Context:
    ctx = typer.Context(typer.main.get_command(app))
    ctx.obj = state
    return ctx


class TestApiPath:
    """Tests for path building."""

    def test_prefixes_api_version(self) -> None:
        assert api_path("applications") == "/api/v1/applications"

    def test_joins_segments(self) -> None:
        assert api_path("secrets", "s1", "decrypt") == "/api/v1/secrets/s1/decrypt"

    def test_encodes_user_segments(self) -> None:
        assert api_path("configurations", "environment", "prod", "key", "a/b c") == (
            "/api/v1/configurations/environment/prod/key/a%2Fb%20c"
        )

    def test_encodes_dot_segments(self) -> None:
        assert api_path("secrets", "..", "decrypt") == "/api/v1/secrets/%2E%2E/decrypt"
        assert api_path("configurations", ".") == "/api/v1/configurations/%2E"

    def test_keeps_dots_inside_segments(self) -> None:
        assert api_path("applications", "v1.2") == "/api/v1/applications/v1.2"
        assert api_path("applications", "...x") == "/api/v1/applications/...x"


class TestResolveProfile:
    """Tests for active profile resolution."""

    def test_uses_global_profile(self, saved_profile: Profile) -> None:
        profile = resolve_profile(CLIState(settings=CLISettings()))
        assert profile == saved_profile

    def test_override_wins(self, profile_path: Path) -> None:
        store = ProfileStore(profiles=[
            Profile(name="default", base_url="https://a", api_key="k1"),
            Profile(name="staging", base_url="https://b", api_key="k2"),
        ])
        store.save(profile_path)

        profile = resolve_profile(CLIState(settings=CLISettings()), "staging")

        assert profile.api_key == "k2"

    def test_missing_profile_is_configuration_error(self, saved_profile: Profile) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_profile(CLIState(settings=CLISettings(), profile="nope"))

        assert "nope" in exc_info.value.message
        assert "login" in exc_info.value.message

    def test_empty_store_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            resolve_profile(CLIState(settings=CLISettings()))

    def test_reads_from_configured_dir(self, tmp_path: Path) -> None:
        config_dir = tmp_path / "custom"
        ProfileStore(profiles=[Profile(name="default", base_url="https://c", api_key="k3")]).save(
            config_dir / "config.json"
        )

        profile = resolve_profile(CLIState(settings=CLISettings(config_dir=config_dir)))

        assert profile.base_url == "https://c"


class TestExecute:
    """Tests for one-call execution."""

    def test_runs_operation_with_profile_client(
        self, saved_profile: Profile, fake_service,
    ) -> None:
        fake_service.respond("GET", "/api/v1/applications", json=[])
        results = []

        async def operation(client) -> None:
            results.append(await client.get(api_path("applications"), JsonValue))

        execute(_context(CLIState(settings=CLISettings())), None, operation)

        assert results == [[]]
        assert len(fake_service.requests) == 1
        assert fake_service.requests[0].headers["Authorization"] == "Bearer k1"

    def test_missing_profile_exits_without_request(self, fake_service) -> None:
        called = []

        async def operation(client) -> None:
            called.append(client)

        with pytest.raises(typer.Exit) as exc_info:
            execute(_context(CLIState(settings=CLISettings(), profile="nope")), None, operation)

        assert exc_info.value.exit_code == 1
        assert called == []
        assert fake_service.requests == []

    def test_request_failure_exits_non_zero(
        self, saved_profile: Profile, fake_service,
    ) -> None:
        fake_service.respond("GET", "/api/v1/applications", status_code=500, text="internal error")

        async def operation(client) -> None:
            await client.get(api_path("applications"), JsonValue)

        with pytest.raises(typer.Exit) as exc_info:
            execute(_context(CLIState(settings=CLISettings())), None, operation)

        assert exc_info.value.exit_code == 1
