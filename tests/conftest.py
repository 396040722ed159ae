"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Every test runs with HOME pointing at a temporary directory and with all
DEVKIT_* variables removed, so nothing touches the real ~/.devkit.
HTTP traffic goes to a FakeService through httpx.MockTransport.
"""

import functools
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from devkit.cli.client import APIClient
from devkit.core.logging import setup_logging
from devkit.core.profiles import Profile, ProfileStore

DEVKIT_ENV_VARS = (
    "DEVKIT_CONFIG_DIR",
    "DEVKIT_PROFILE",
    "DEVKIT_LOG_LEVEL",
    "DEVKIT_LOG_FORMAT",
    "DEVKIT_LOG_FILE",
    "DEVKIT_REQUEST_TIMEOUT",
)

BASE_URL = "https://api.example.com"
API_KEY = "k1"


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temporary directory and clear DEVKIT_* settings."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in DEVKIT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    setup_logging(level="WARNING")
    return home


@pytest.fixture
def profile_path(isolated_env: Path) -> Path:
    """Location of the profile file for the isolated HOME."""
    return isolated_env / ".devkit" / "config.json"


@pytest.fixture
def saved_profile(profile_path: Path) -> Profile:
    """Persist a 'default' profile and return it."""
    profile = Profile(name="default", base_url=BASE_URL, api_key=API_KEY)
    ProfileStore(profiles=[profile]).save(profile_path)
    return profile


# =============================================================================
# HTTP Fixtures
# =============================================================================


class FakeService:
    """
    Programmable stand-in for the remote service.

    Usage:
        fake_service.respond("GET", "/api/v1/applications", json=[...])
        ... run a command ...
        assert fake_service.requests[0].headers["Authorization"] == "Bearer k1"
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def respond(self, method: str, path: str, status_code: int = 200, **kwargs: Any) -> None:
        """Answer method + path with a fixed response (json=..., text=..., content=...)."""
        self._routes[(method, path)] = lambda request: httpx.Response(status_code, **kwargs)

    def fail(self, method: str, path: str, error: type[httpx.TransportError] = httpx.ConnectError) -> None:
        """Make method + path raise a transport error."""

        def _raise(request: httpx.Request) -> httpx.Response:
            raise error("connection refused", request=request)

        self._routes[(method, path)] = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text=f"no route for {request.method} {request.url.path}")
        return route(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def json_body(self, index: int = -1) -> Any:
        """Decoded JSON body of a recorded request."""
        return json.loads(self.requests[index].content)


@pytest.fixture
def fake_service(monkeypatch: pytest.MonkeyPatch) -> FakeService:
    """Route every APIClient built by the command router to a FakeService."""
    service = FakeService()
    monkeypatch.setattr(
        "devkit.cli.router.APIClient",
        functools.partial(APIClient, transport=service.transport),
    )
    return service
