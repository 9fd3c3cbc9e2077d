"""
Conversion service implementation for unpkgify.

Loads configuration, sets up logging, reads the input text and prints the
converted lines. The CLI commands are thin wrappers around this class.
"""
import json
import logging
import sys
from typing import Optional, Tuple

from unpkgify.cdn_model import load_settings
from unpkgify.config_validator import ConfigValidator
from unpkgify.converter import Converter
from unpkgify.models import ConversionResult
from unpkgify.rich_utils.ui_helpers import get_console, print_plain, render_lines, render_rules_table
from unpkgify.utils.exceptions import ConfigurationError, InvalidConfigError

from unpkgify.core.config_manager import ConfigManager

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class ConversionService:
    """Runs conversions for the command line."""

    def __init__(self):
        self.config_manager = ConfigManager()
        self.validator = ConfigValidator()
        self.console = get_console()
        self.error_console = get_console(stderr=True)
        self.logger = logging.getLogger(__name__)

    def initialize(
        self,
        config_path: Optional[str],
        output_format: Optional[str] = None,
        show_labels: Optional[bool] = None,
    ) -> dict:
        """Load, merge and validate configuration, then configure logging."""

        config = self.config_manager.discover_and_load_config(config_path)
        config = self.config_manager.merge_config_and_args(config, output_format, show_labels)

        errors = self.validator.validate_config(config)
        if errors:
            raise InvalidConfigError(
                "Invalid configuration",
                source=self.config_manager.source,
                errors=errors,
            )

        self.configure_logging(config)
        self.logger.info(f"Loaded configuration from {self.config_manager.source}")
        return config

    def configure_logging(self, config: dict) -> None:
        """Send log records to stderr, and to a file when one is configured."""
        logging_config = config.get("logging") or {}
        handlers = [logging.StreamHandler(sys.stderr)]
        if logging_config.get("file"):
            try:
                handlers.append(logging.FileHandler(logging_config["file"]))
            except OSError as e:
                raise InvalidConfigError(
                    "Cannot open log file",
                    source=self.config_manager.source,
                    original_exception=e,
                )

        logging.basicConfig(
            level=self.validator.log_level(logging_config),
            format=LOG_FORMAT,
            handlers=handlers,
            force=True,
        )

    def build_converter(self, config: dict) -> Converter:
        return Converter(load_settings(config))

    def read_input(self, text: Optional[str]) -> str:
        """Return ``text``, or standard input when it is missing or ``-``."""
        if text is None or text == "-":
            return sys.stdin.read()
        return text

    def convert(self, config: dict, text: str) -> ConversionResult:
        converter = self.build_converter(config)
        result = converter.convert(text)
        self.logger.info(f"Converted input into {len(result)} line(s)")
        return result

    def print_result(self, config: dict, result: ConversionResult) -> None:
        output = config.get("output") or {}
        if output.get("format") == "json":
            print_plain(self.console, json.dumps(result.to_dict(), indent=2))
        else:
            render_lines(self.console, result, show_labels=bool(output.get("show_labels")))

    def execute_conversion(
        self,
        text: Optional[str],
        config_path: Optional[str] = None,
        output_format: Optional[str] = None,
        show_labels: Optional[bool] = None,
    ) -> Tuple[int, Optional[ConversionResult]]:
        """Run one conversion end to end.

        Returns:
            Tuple of the process exit code and the conversion result
            (``None`` when configuration failed)
        """
        try:
            config = self.initialize(config_path, output_format, show_labels)
        except ConfigurationError as e:
            self.error_console.print(f"❌ {e}", style="bold red", markup=False, highlight=False, soft_wrap=True)
            return 1, None

        result = self.convert(config, self.read_input(text))
        self.print_result(config, result)
        return 0, result

    def execute_rules_listing(self, config_path: Optional[str] = None) -> int:
        """Print the active rules in priority order."""
        try:
            config = self.initialize(config_path)
        except ConfigurationError as e:
            self.error_console.print(f"❌ {e}", style="bold red", markup=False, highlight=False, soft_wrap=True)
            return 1

        converter = self.build_converter(config)
        render_rules_table(self.console, converter.rules, converter)
        return 0
