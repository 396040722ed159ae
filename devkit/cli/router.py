"""
Command Router.

Glue between parsed commands and the API: resolve the active profile,
build exactly one APIClient for it, run the command's single call and turn
any ApplicationError into an error message and exit status 1.
"""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import typer

from devkit.cli.client import APIClient
from devkit.cli.output import report_error
from devkit.core.config import CLISettings, resolve_profile_path
from devkit.core.exceptions import ApplicationError, ConfigurationError
from devkit.core.logging import get_logger, log_with_source
from devkit.core.profiles import Profile, ProfileStore

logger = get_logger(__name__)

API_PREFIX = "/api/v1"

PROFILE_OPTION = typer.Option(
    None,
    "--profile",
    "-p",
    help="Profile name (overrides the global --profile)",
    show_default=False,
)


@dataclass
class CLIState:
    """Per-invocation state set by the root callback."""

    settings: CLISettings
    profile: str = "default"


def get_state(ctx: typer.Context) -> CLIState:
    """Return the state stored on the root context."""
    state = ctx.find_object(CLIState)
    if state is None:
        raise ConfigurationError("CLI state is not initialized")
    return state


def _encode_segment(segment: str) -> str:
    # "." and ".." would be collapsed by URL normalization
    if segment and segment.strip(".") == "":
        return "%2E" * len(segment)
    return quote(segment, safe="")


def api_path(*segments: str) -> str:
    """Build an /api/v1 path, percent-encoding every user supplied segment."""
    return API_PREFIX + "".join(f"/{_encode_segment(str(segment))}" for segment in segments)


def resolve_profile(state: CLIState, override: Optional[str] = None) -> Profile:
    """
    Load the profile store and return the active profile.

    Raises:
        ConfigurationError: If the profile does not exist
    """
    name = override or state.profile
    store = ProfileStore.load(resolve_profile_path(state.settings))
    profile = store.get_profile(name)
    if profile is None:
        raise ConfigurationError(
            f"Profile '{name}' not found. Run `devkit login --profile {name}` first."
        )
    return profile


def execute(
    ctx: typer.Context,
    profile: Optional[str],
    operation: Callable[[APIClient], Awaitable[None]],
) -> None:
    """
    Run one API operation against the active profile.

    The profile is resolved before any client exists, so a missing profile
    never causes network traffic.
    """
    state = get_state(ctx)
    try:
        active = resolve_profile(state, profile)
        log_with_source(logger, "cli", "debug", "Using profile", profile=active.name, base_url=active.base_url)
        asyncio.run(_run(active, state.settings, operation))
    except ApplicationError as e:
        log_with_source(logger, "cli", "debug", "Command failed", error_code=e.code)
        report_error(e)
        raise typer.Exit(1) from e


async def _run(
    profile: Profile,
    settings: CLISettings,
    operation: Callable[[APIClient], Awaitable[None]],
) -> None:
    """Build the client for profile, run operation and close the client."""
    async with APIClient(profile.base_url, profile.api_key, timeout=settings.request_timeout) as client:
        await operation(client)
