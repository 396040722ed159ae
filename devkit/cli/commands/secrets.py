"""
Secret Commands.

Secret lifecycle (create, decrypt, rotate, deactivate, delete) and the
rotation reporting endpoints. Rotation itself happens in the service; the
CLI only forwards values and prints results.
"""

from typing import Optional

import typer
from pydantic import JsonValue

from devkit.cli.client import APIClient
from devkit.cli.output import emit_json, emit_row, emit_value
from devkit.cli.router import PROFILE_OPTION, api_path, execute
from devkit.cli.schemas import (
    CreateSecretRequest,
    RotateSecretRequest,
    RotationStatsResponse,
    SecretResponse,
    SecretRotationResponse,
    SecretWithDecryptedResponse,
    ValidationResponse,
)

app = typer.Typer(help="Manage secrets", no_args_is_help=True)

DEFAULT_ROTATION_POLICY = "MANUAL"
DEFAULT_RECENT_DAYS = 7


def _emit_rotations(rotations: list[SecretRotationResponse]) -> None:
    for rotation in rotations:
        emit_row(rotation.id, rotation.secret_key, rotation.status, rotation.rotation_date)


@app.command("list")
def list_secrets(
    ctx: typer.Context,
    application: str = typer.Argument(..., help="Application id"),
    environment: Optional[str] = typer.Option(None, "--environment", "-e", help="Environment id"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """
    List secrets for an application.

    Prints id, key and description, one secret per line. Values are never listed.
    """
    if environment is not None:
        path = api_path("secrets", "application", application, "environment", environment)
    else:
        path = api_path("secrets", "application", application)

    async def _list(client: APIClient) -> None:
        secrets = await client.get(path, list[SecretResponse])
        for secret in secrets:
            emit_row(secret.id, secret.key, secret.description)

    execute(ctx, profile, _list)


@app.command()
def get(
    ctx: typer.Context,
    secret_id: str = typer.Argument(..., metavar="ID", help="Secret id"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """
    Get decrypted secret.

    Prints only the value, e.g. export DB_PASSWORD=$(devkit secrets get ID).
    """

    async def _get(client: APIClient) -> None:
        secret = await client.get(api_path("secrets", secret_id, "decrypt"), SecretWithDecryptedResponse)
        emit_value(secret.decrypted_value)

    execute(ctx, profile, _get)


@app.command()
def create(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Secret key"),
    encrypted_value: str = typer.Argument(..., help="Encrypted value"),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="Description"),
    application: str = typer.Option(..., "--application", "-a", help="Application id"),
    environment: Optional[str] = typer.Option(None, "--environment", "-e", help="Environment id"),
    rotation_policy: str = typer.Option(
        DEFAULT_ROTATION_POLICY,
        "--rotation-policy",
        "-r",
        help="Rotation policy, passed to the service unchanged",
    ),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """Create secret."""
    request = CreateSecretRequest(
        key=key,
        encrypted_value=encrypted_value,
        description=description,
        application_id=application,
        environment_id=environment,
        rotation_policy=rotation_policy,
    )

    async def _create(client: APIClient) -> None:
        await client.post(api_path("secrets"), request, JsonValue)
        typer.echo("Secret created")

    execute(ctx, profile, _create)


@app.command()
def rotate(
    ctx: typer.Context,
    secret_id: str = typer.Argument(..., metavar="ID", help="Secret id"),
    new_encrypted_value: str = typer.Argument(..., help="New encrypted value"),
    rotated_by: str = typer.Argument(..., help="Who performed the rotation"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """Rotate secret."""
    request = RotateSecretRequest(new_encrypted_value=new_encrypted_value, rotated_by=rotated_by)

    async def _rotate(client: APIClient) -> None:
        await client.post(api_path("secrets", secret_id, "rotate"), request, JsonValue)
        typer.echo("Secret rotated")

    execute(ctx, profile, _rotate)


@app.command()
def deactivate(
    ctx: typer.Context,
    secret_id: str = typer.Argument(..., metavar="ID", help="Secret id"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """Deactivate secret."""

    async def _deactivate(client: APIClient) -> None:
        await client.post(api_path("secrets", secret_id, "deactivate"), {}, JsonValue)
        typer.echo("Secret deactivated")

    execute(ctx, profile, _deactivate)


@app.command()
def delete(
    ctx: typer.Context,
    secret_id: str = typer.Argument(..., metavar="ID", help="Secret id"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """Delete secret."""

    async def _delete(client: APIClient) -> None:
        await client.delete(api_path("secrets", secret_id))
        typer.echo("Secret deleted")

    execute(ctx, profile, _delete)


@app.command()
def rotations(
    ctx: typer.Context,
    secret_id: str = typer.Argument(..., metavar="SECRET_ID", help="Secret id"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """Get rotation history for a secret."""

    async def _rotations(client: APIClient) -> None:
        history = await client.get(api_path("secrets", secret_id, "rotations"), list[SecretRotationResponse])
        _emit_rotations(history)

    execute(ctx, profile, _rotations)


@app.command("app-rotations")
def app_rotations(
    ctx: typer.Context,
    application: str = typer.Argument(..., help="Application id"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """Get rotation history for an application."""

    async def _app_rotations(client: APIClient) -> None:
        history = await client.get(
            api_path("secrets", "application", application, "rotations"),
            list[SecretRotationResponse],
        )
        _emit_rotations(history)

    execute(ctx, profile, _app_rotations)


@app.command()
def validate(
    ctx: typer.Context,
    application: Optional[str] = typer.Option(None, "--application", "-a", help="Application id"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """Validate secrets rotation status."""

    async def _validate(client: APIClient) -> None:
        result = await client.get(
            api_path("secrets", "validate"),
            ValidationResponse,
            params={"applicationId": application},
        )
        typer.echo(f"needsRotation: {len(result.needs_rotation)}")
        typer.echo(f"expiringSoon: {len(result.expiring_soon)}")
        typer.echo("details: ", nl=False)
        emit_json(result.details)

    execute(ctx, profile, _validate)


@app.command()
def stats(
    ctx: typer.Context,
    application: Optional[str] = typer.Option(None, "--application", "-a", help="Application id"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """Get rotation statistics."""

    async def _stats(client: APIClient) -> None:
        result = await client.get(
            api_path("secrets", "stats"),
            RotationStatsResponse,
            params={"applicationId": application},
        )
        typer.echo(
            f"total={result.total_rotations} "
            f"success={result.successful_rotations} "
            f"failed={result.failed_rotations} "
            f"manual={result.manual_rotations} "
            f"auto={result.automatic_rotations} "
            f"rate={result.success_rate:.2f}"
        )

    execute(ctx, profile, _stats)


@app.command()
def recent(
    ctx: typer.Context,
    days: int = typer.Option(DEFAULT_RECENT_DAYS, "--days", "-d", help="Look-back window in days"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """Get recent rotations."""

    async def _recent(client: APIClient) -> None:
        history = await client.get(
            api_path("secrets", "rotations", "recent"),
            list[SecretRotationResponse],
            params={"days": days},
        )
        _emit_rotations(history)

    execute(ctx, profile, _recent)


@app.command("rotate-due")
def rotate_due(
    ctx: typer.Context,
    application: Optional[str] = typer.Option(None, "--application", "-a", help="Application id"),
    profile: Optional[str] = PROFILE_OPTION,
) -> None:
    """Trigger automatic rotation for due secrets."""

    async def _rotate_due(client: APIClient) -> None:
        result = await client.post(
            api_path("secrets", "rotate-due"),
            {},
            JsonValue,
            params={"applicationId": application},
        )
        emit_json(result)

    execute(ctx, profile, _rotate_due)
