"""
Configuration Commands.

Read and write configuration values of an environment.
"""

from typing import Optional

import typer
from pydantic import JsonValue

from devkit.cli.client import APIClient
from devkit.cli.output import emit_row, emit_value
from devkit.cli.router import PROFILE_OPTION, api_path, execute
from devkit.cli.schemas import (
    ConfigurationResponse,
    CreateConfigurationRequest,
    UpdateConfigurationRequest,
)

app = typer.Typer(help="Manage configurations", no_args_is_help=True)

DEFAULT_CONFIG_TYPE = "STRING"


@app.command("list")
def list_configs(
    ctx: typer.Context,
    environment: str = typer.Option(..., "--environment", "-e", help="Environment id"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """
    List configurations for an environment.

    Prints id, key and value, one configuration per line.
    """

    async def _list(client: APIClient) -> None:
        configs = await client.get(
            api_path("configurations", "environment", environment),
            list[ConfigurationResponse],
        )
        for config in configs:
            emit_row(config.id, config.key, config.value)

    execute(ctx, profile, _list)


@app.command()
def get(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Configuration key"),
    environment: str = typer.Option(..., "--environment", "-e", help="Environment id"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """
    Get configuration value.

    Prints the bare value so it can be used in shell pipelines.
    """

    async def _get(client: APIClient) -> None:
        config = await client.get(
            api_path("configurations", "environment", environment, "key", key),
            ConfigurationResponse,
        )
        emit_value(config.value)

    execute(ctx, profile, _get)


@app.command("set")
def set_config(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Configuration key"),
    value: str = typer.Argument(..., help="Configuration value"),
    environment: str = typer.Option(..., "--environment", "-e", help="Environment id"),
    config_type: str = typer.Option(DEFAULT_CONFIG_TYPE, "--config-type", help="Value type"),
    description: Optional[str] = typer.Option(None, "--description", help="Description"),
    secret: bool = typer.Option(False, "--secret", help="Mark the value as secret"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """
    Set configuration value.

    Examples:
        devkit config set -e ENV_ID DATABASE_HOST db.internal
        devkit config set -e ENV_ID MAX_CONN 20 --config-type NUMBER
    """
    request = CreateConfigurationRequest(
        key=key,
        value=value,
        config_type=config_type,
        description=description,
        is_secret=secret,
        environment_id=environment,
    )

    async def _set(client: APIClient) -> None:
        await client.post(api_path("configurations"), request, JsonValue)
        typer.echo("Configuration saved")

    execute(ctx, profile, _set)


@app.command()
def update(
    ctx: typer.Context,
    config_id: str = typer.Argument(..., metavar="ID", help="Configuration id"),
    value: str = typer.Argument(..., help="New value"),
    config_type: str = typer.Option(DEFAULT_CONFIG_TYPE, "--config-type", help="Value type"),
    description: Optional[str] = typer.Option(None, "--description", help="Description"),
    secret: bool = typer.Option(False, "--secret", help="Mark the value as secret"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """Update configuration."""
    request = UpdateConfigurationRequest(
        value=value,
        config_type=config_type,
        description=description,
        is_secret=secret,
    )

    async def _update(client: APIClient) -> None:
        await client.put(api_path("configurations", config_id), request, JsonValue)
        typer.echo("Configuration updated")

    execute(ctx, profile, _update)


@app.command()
def delete(
    ctx: typer.Context,
    config_id: str = typer.Argument(..., metavar="ID", help="Configuration id"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """Delete configuration."""

    async def _delete(client: APIClient) -> None:
        await client.delete(api_path("configurations", config_id))
        typer.echo("Configuration deleted")

    execute(ctx, profile, _delete)
