"""Configuration validation for unpkgify."""

import logging
import re
from typing import Any, Dict, List

from .models import RuleName

OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigValidator:
    """Validates unpkgify configuration before it is used."""

    def __init__(self):
        self.known_rules = {rule.value for rule in RuleName}
        self.url_pattern = re.compile(r"^https?://[^\s/]+")

    def validate_config(self, config: Dict[str, Any]) -> List[str]:
        """Validate complete configuration.

        Args:
            config: Configuration dictionary

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        for section in ("cdn", "rules", "output", "logging"):
            if config.get(section) is not None and not isinstance(config[section], dict):
                errors.append(f"'{section}' section must be a mapping")

        if errors:
            return errors

        errors.extend(self.validate_cdn(config.get("cdn") or {}))
        errors.extend(self.validate_rules(config.get("rules") or {}))
        errors.extend(self.validate_output(config.get("output") or {}))
        errors.extend(self.validate_logging(config.get("logging") or {}))

        return errors

    def validate_cdn(self, cdn_config: Dict[str, Any]) -> List[str]:
        """Validate the cdn section.

        Args:
            cdn_config: CDN configuration dictionary

        Returns:
            List of validation error messages
        """
        errors = []

        base_url = cdn_config.get("base_url")
        if base_url is not None:
            if not isinstance(base_url, str) or not self.url_pattern.match(base_url):
                errors.append("'cdn.base_url' must be an http(s) URL")

        default_version = cdn_config.get("default_version")
        if default_version is not None:
            if not isinstance(default_version, str) or not default_version.strip():
                errors.append("'cdn.default_version' must be a non-empty string")
            elif re.search(r"\s", default_version):
                errors.append("'cdn.default_version' must not contain whitespace")

        placeholder = cdn_config.get("file_path_placeholder")
        if placeholder is not None and not isinstance(placeholder, str):
            errors.append("'cdn.file_path_placeholder' must be a string")

        return errors

    def validate_rules(self, rules_config: Dict[str, Any]) -> List[str]:
        """Validate the rules section."""
        errors = []

        if "enabled" not in rules_config or rules_config["enabled"] is None:
            return errors

        enabled = rules_config["enabled"]
        if not isinstance(enabled, list):
            errors.append("'rules.enabled' must be a list of rule names")
            return errors

        seen = set()
        for name in enabled:
            if not isinstance(name, str):
                errors.append("Rule names in 'rules.enabled' must be strings")
                continue
            if name not in self.known_rules:
                errors.append(
                    f"Unknown rule '{name}' in 'rules.enabled'. "
                    f"Valid rules: {', '.join(rule.value for rule in RuleName)}"
                )
            elif name in seen:
                errors.append(f"Rule '{name}' is listed more than once in 'rules.enabled'")
            seen.add(name)

        return errors

    def validate_output(self, output_config: Dict[str, Any]) -> List[str]:
        """Validate the output section."""
        errors = []

        output_format = output_config.get("format")
        if output_format is not None and output_format not in OUTPUT_FORMATS:
            errors.append(f"'output.format' must be one of: {', '.join(OUTPUT_FORMATS)}")

        show_labels = output_config.get("show_labels")
        if show_labels is not None and not isinstance(show_labels, bool):
            errors.append("'output.show_labels' must be boolean")

        return errors

    def validate_logging(self, logging_config: Dict[str, Any]) -> List[str]:
        """Validate the logging section."""
        errors = []

        level = logging_config.get("level")
        if level is not None:
            if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
                errors.append(f"'logging.level' must be one of: {', '.join(LOG_LEVELS)}")

        log_file = logging_config.get("file")
        if log_file is not None and not isinstance(log_file, str):
            errors.append("'logging.file' must be a path string")

        return errors

    def log_level(self, logging_config: Dict[str, Any]) -> int:
        """Resolve the configured logging level, defaulting to WARNING."""
        level = str(logging_config.get("level") or "WARNING").upper()
        return getattr(logging, level, logging.WARNING)
