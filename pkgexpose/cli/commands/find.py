"""Find command implementation."""
import sys
from typing import Optional

import typer

from pkgexpose.core.service import ManifestService


def find_command(
    start: Optional[str] = typer.Argument(None, help="Directory to search upward from (default: current directory)"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
):
    """Print the path of the nearest package manifest."""

    exit_code = ManifestService().execute_find(start, config_path=config_path)

    if exit_code != 0:
        sys.exit(exit_code)
