"""Allow running the CLI with ``python -m devkit``."""

from devkit.cli.main import app

if __name__ == "__main__":
    app(prog_name="devkit")
