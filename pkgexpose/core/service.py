"""
Manifest service used by the command line interface.

Keeps the CLI layer thin: configuration, logging setup, the library calls
and rendering all happen here.
"""
import logging
import os
from typing import List, Optional

import yaml
from rich.markup import escape

from pkgexpose.api import find, read
from pkgexpose.config_manager import ConfigManager
from pkgexpose.config_validator import ConfigValidator
from pkgexpose.exceptions import PkgExposeError
from pkgexpose.rich_utils.ui_helpers import get_console, render_properties
from pkgexpose.selector import select_properties

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2


class ManifestService:
    """Runs pkgexpose commands and reports the outcome as an exit code."""

    def __init__(self):
        self.config_manager = ConfigManager()
        self.config_validator = ConfigValidator()
        self.console = get_console()
        self.error_console = get_console(stderr=True)

    def initialize(
        self,
        config_path: Optional[str],
        include: Optional[List[str]] = None,
        output_format: Optional[str] = None,
    ) -> Optional[dict]:
        """Load, merge and validate configuration; ``None`` when invalid."""
        try:
            config = self.config_manager.discover_and_load_config(config_path)
        except (FileNotFoundError, yaml.YAMLError) as e:
            self.error_console.print(f"[red]❌ {escape(str(e))}[/red]")
            return None

        config = self.config_manager.merge_config_and_args(config, include, output_format)

        errors = self.config_validator.validate_config(config)
        if errors:
            for error in errors:
                self.error_console.print(f"[red]❌ Invalid configuration: {escape(error)}[/red]")
            return None

        logging.basicConfig(level=self.config_validator.log_level(config))
        return config

    def _start_dir(self, start: Optional[str]) -> str:
        return os.path.abspath(start or os.getcwd())

    def _report(self, error: PkgExposeError) -> int:
        self.error_console.print(f"[red]❌ {escape(error.message)}[/red]", highlight=False)
        if error.path:
            self.error_console.print(f"   Path: {error.path}", markup=False, highlight=False)
        if error.suggested_action:
            self.error_console.print(f"   {error.suggested_action}", markup=False, highlight=False)
        return EXIT_ERROR

    def execute_show(
        self,
        start: Optional[str],
        config_path: Optional[str] = None,
        include: Optional[List[str]] = None,
        output_format: Optional[str] = None,
    ) -> int:
        """Print the selected properties of the nearest manifest."""
        config = self.initialize(config_path, include, output_format)
        if config is None:
            return EXIT_CONFIG_ERROR

        try:
            info = read(None, self._start_dir(start))
        except PkgExposeError as e:
            return self._report(e)

        properties = select_properties(info.package, config["include"])
        render_properties(self.console, properties, config["output"]["format"], title=info.dir)
        return EXIT_OK

    def execute_find(self, start: Optional[str], config_path: Optional[str] = None) -> int:
        """Print the path of the nearest manifest."""
        config = self.initialize(config_path)
        if config is None:
            return EXIT_CONFIG_ERROR

        try:
            manifest_path = find(None, self._start_dir(start))
        except PkgExposeError as e:
            return self._report(e)

        self.console.print(manifest_path, markup=False, highlight=False, soft_wrap=True)
        return EXIT_OK
