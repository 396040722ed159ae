"""
CLI Commands.

Organized by resource.
"""

from devkit.cli.commands.apps import app as apps_app
from devkit.cli.commands.auth import login
from devkit.cli.commands.config import app as config_app
from devkit.cli.commands.secrets import app as secrets_app

__all__ = [
    "apps_app",
    "config_app",
    "login",
    "secrets_app",
]
