"""Configuration validation for the pkgexpose CLI."""

import logging
from typing import Any, Dict, List

OUTPUT_FORMATS = ("table", "json", "yaml")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigValidator:
    """Validates pkgexpose configuration before a command runs."""

    def validate_config(self, config: Dict[str, Any]) -> List[str]:
        """Validate complete configuration.

        Args:
            config: Configuration dictionary

        Returns:
            List of validation error messages (empty if valid)
        """
        if not isinstance(config, dict):
            return ["Configuration must be a mapping"]

        errors = []
        errors.extend(self.validate_include(config.get("include", [])))
        errors.extend(self.validate_output(config.get("output", {})))
        errors.extend(self.validate_logging(config.get("logging", {})))
        return errors

    def validate_include(self, include: Any) -> List[str]:
        """Validate the default include list."""
        if not isinstance(include, list):
            return ["'include' must be a list of manifest keys"]

        bad = [item for item in include if not isinstance(item, str)]
        if bad:
            return [f"'include' entries must be strings, got: {bad}"]
        return []

    def validate_output(self, output_config: Any) -> List[str]:
        """Validate the output section."""
        if not isinstance(output_config, dict):
            return ["'output' section must be a mapping"]

        output_format = output_config.get("format", "table")
        if output_format not in OUTPUT_FORMATS:
            return [f"Unknown output format '{output_format}', expected one of: {', '.join(OUTPUT_FORMATS)}"]
        return []

    def validate_logging(self, logging_config: Any) -> List[str]:
        """Validate the logging section."""
        if not isinstance(logging_config, dict):
            return ["'logging' section must be a mapping"]

        level = logging_config.get("level", "WARNING")
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            return [f"Unknown logging level '{level}', expected one of: {', '.join(LOG_LEVELS)}"]
        return []

    def log_level(self, config: Dict[str, Any]) -> int:
        """Return the numeric logging level of a validated config."""
        return getattr(logging, config.get("logging", {}).get("level", "WARNING").upper())
