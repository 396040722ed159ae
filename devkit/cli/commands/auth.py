"""
Login Command.

Stores a base URL and API key under a profile name. Nothing is sent to the
service; the credentials are first used by the next command.
"""

from typing import Optional

import typer

from devkit.cli.output import report_error
from devkit.cli.router import PROFILE_OPTION, get_state
from devkit.core.config import resolve_profile_path
from devkit.core.exceptions import ApplicationError
from devkit.core.logging import get_logger, log_with_source
from devkit.core.profiles import Profile, ProfileStore

logger = get_logger(__name__)


def login(
    ctx: typer.Context,
    url: str = typer.Option(..., "--url", "-u", help="Service base URL"),
    api_key: str = typer.Option(
        ...,
        "--api-key",
        "-a",
        help="API key (prompted for when omitted)",
        prompt="API key",
        hide_input=True,
    ),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """
    Save API key + base URL under a profile.

    Examples:
        devkit login --url https://devkit.example.com --api-key KEY
        devkit --profile staging login -u https://staging.example.com
    """
    state = get_state(ctx)
    name = profile or state.profile

    try:
        path = resolve_profile_path(state.settings)
        store = ProfileStore.load(path)
        store.upsert_profile(Profile(name=name, base_url=url.rstrip("/"), api_key=api_key))
        store.save(path)
    except ApplicationError as e:
        report_error(e)
        raise typer.Exit(1) from e

    log_with_source(logger, "cli", "info", "Profile saved", profile=name, path=str(path))
    typer.echo(f"Saved profile '{name}'")
