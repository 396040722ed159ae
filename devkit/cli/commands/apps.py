"""
Application Commands.

List, create, show and update applications.
"""

from typing import Optional

import typer
from pydantic import JsonValue

from devkit.cli.client import APIClient
from devkit.cli.output import emit_row
from devkit.cli.router import PROFILE_OPTION, api_path, execute
from devkit.cli.schemas import (
    ApplicationResponse,
    CreateApplicationRequest,
    UpdateApplicationRequest,
)

app = typer.Typer(help="Manage applications", no_args_is_help=True)


@app.command("list")
def list_apps(
    ctx: typer.Context,
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """
    List applications.

    Prints id, name and description, one application per line.
    """
    execute(ctx, profile, _list_apps)


async def _list_apps(client: APIClient) -> None:
    apps = await client.get(api_path("applications"), list[ApplicationResponse])
    for application in apps:
        emit_row(application.id, application.name, application.description)


@app.command()
def create(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Application name"),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="Description"),
    owner_email: str = typer.Option(..., "--owner-email", "-o", help="Owner email address"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """
    Create application.

    Examples:
        devkit apps create billing --owner-email team@example.com
    """
    request = CreateApplicationRequest(name=name, description=description, owner_email=owner_email)

    async def _create(client: APIClient) -> None:
        await client.post(api_path("applications"), request, JsonValue)
        typer.echo("Application created")

    execute(ctx, profile, _create)


@app.command()
def show(
    ctx: typer.Context,
    app_id: str = typer.Argument(..., metavar="ID", help="Application id"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """Show application by id."""

    async def _show(client: APIClient) -> None:
        application = await client.get(api_path("applications", app_id), ApplicationResponse)
        emit_row(application.id, application.name, application.owner_email, application.is_active)

    execute(ctx, profile, _show)


@app.command()
def update(
    ctx: typer.Context,
    app_id: str = typer.Argument(..., metavar="ID", help="Application id"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New name"),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="New description"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """Update application name and/or description."""
    request = UpdateApplicationRequest(name=name, description=description)

    async def _update(client: APIClient) -> None:
        await client.put(api_path("applications", app_id), request, JsonValue)
        typer.echo("Application updated")

    execute(ctx, profile, _update)
