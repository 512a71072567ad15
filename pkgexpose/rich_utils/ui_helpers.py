import json
import os
import sys
from typing import Any, Dict

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table


def is_ci_environment(stream=None):
    stream = stream if stream is not None else sys.stdout
    return (
        os.getenv('CI') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        not stream.isatty()
    )


def get_console(stderr: bool = False) -> Console:
    """Detect environment and create console for stdout or stderr."""
    if is_ci_environment(sys.stderr if stderr else sys.stdout):
        # CI/automated environment - no colors, no interactive elements
        return Console(force_terminal=False, no_color=True, stderr=stderr)

    # Interactive terminal - full Rich capabilities
    return Console(stderr=stderr)


def _cell(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def render_properties(console: Console, properties: Dict[str, Any], output_format: str, title: str = None):
    """Print selected manifest properties in the requested format."""
    if output_format == "json":
        console.print_json(json.dumps(properties, ensure_ascii=False))
    elif output_format == "yaml":
        console.print(yaml.safe_dump(properties, sort_keys=False, allow_unicode=True).rstrip(), markup=False, highlight=False, soft_wrap=True)
    else:
        table = Table(title=title)
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Value")
        for key, value in properties.items():
            table.add_row(escape(key), escape(_cell(value)))
        console.print(table)
