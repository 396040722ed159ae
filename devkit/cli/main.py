"""
CLI Entry Point.

Command-line client for the DevKit service.
Built with Typer for type-safe commands; results are printed as plain text.

Usage:
    devkit --help                                         # Show help

    # Credentials
    devkit login --url https://devkit.example.com --api-key KEY
    devkit --profile staging login -u https://staging.example.com

    # Applications
    devkit apps list
    devkit apps create billing --owner-email team@example.com

    # Configurations
    devkit config list -e ENV_ID
    devkit config get -e ENV_ID DATABASE_HOST

    # Secrets
    devkit secrets list APP_ID
    devkit secrets get SECRET_ID
    devkit secrets stats -a APP_ID

Options:
    --profile, -p     Profile to use (default: "default", env DEVKIT_PROFILE)
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
    --version         Show version and exit
"""

from typing import Optional

import typer

from devkit import __version__
from devkit.cli.commands import apps_app, config_app, login, secrets_app
from devkit.cli.output import report_error
from devkit.cli.router import CLIState
from devkit.core.config import load_settings
from devkit.core.exceptions import ConfigurationError, StorageError
from devkit.core.logging import get_logger, setup_logging

logger = get_logger(__name__)

# Create main app
app = typer.Typer(
    name="devkit",
    help="DevKit CLI - Manage applications, configurations and secrets.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register commands
app.command("login")(login)
app.add_typer(config_app, name="config")
app.add_typer(apps_app, name="apps")
app.add_typer(secrets_app, name="secrets")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"devkit {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    profile: str = typer.Option(
        "default",
        "--profile",
        "-p",
        envvar="DEVKIT_PROFILE",
        help="Profile name",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    DevKit CLI.

    Save credentials with [bold]login[/bold], then manage applications,
    configurations and secrets. Each command makes exactly one API call.
    """
    try:
        settings = load_settings()
    except ConfigurationError as e:
        report_error(e)
        raise typer.Exit(1) from e

    # Configure logging based on flags
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = settings.log_level
    try:
        setup_logging(level=level, format_type=settings.log_format, log_file=settings.log_file)
    except OSError as e:
        error = StorageError(f"Cannot open log file {settings.log_file}: {e}")
        report_error(error)
        raise typer.Exit(1) from e
    logger.debug("Debug mode enabled", profile=profile)

    ctx.obj = CLIState(settings=settings, profile=profile)


if __name__ == "__main__":
    app()
