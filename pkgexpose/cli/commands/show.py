"""
Show command implementation.

Thin wrapper around ManifestService that handles CLI argument parsing
and delegates the work to the service layer.
"""
import sys
from typing import List, Optional

import typer

from pkgexpose.core.service import ManifestService


def show_command(
    start: Optional[str] = typer.Argument(None, help="Directory to search upward from (default: current directory)"),
    include: Optional[List[str]] = typer.Option(None, "-i", "--include", help="Manifest key to show; repeat for more"),
    output_format: Optional[str] = typer.Option(None, "-f", "--format", help="Output format: table, json or yaml"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
):
    """Show properties of the nearest package manifest."""

    exit_code = ManifestService().execute_show(
        start,
        config_path=config_path,
        include=include,
        output_format=output_format,
    )

    if exit_code != 0:
        sys.exit(exit_code)
