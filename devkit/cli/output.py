"""
Output Rendering.

Command results are plain text on stdout so they can be piped: one
tab-separated line per record, bare values for scalars. Errors are
rendered with Rich on stderr.
"""

import json
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from devkit.core.exceptions import ApplicationError

error_console = Console(stderr=True)


def format_field(value: Any) -> str:
    """Render one field: booleans as true/false, None as an empty string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def emit_row(*fields: Any) -> None:
    """Print one tab-separated record."""
    typer.echo("\t".join(format_field(field) for field in fields))


def emit_value(value: Any) -> None:
    """Print a bare scalar value with no label."""
    typer.echo(format_field(value))


def emit_json(value: Any) -> None:
    """Print an opaque JSON value in compact form."""
    typer.echo(json.dumps(value, separators=(",", ":")))


def report_error(error: ApplicationError) -> None:
    """Print an application error to stderr."""
    error_console.print(f"[red]Error:[/red] {escape(error.message)}", soft_wrap=True)
