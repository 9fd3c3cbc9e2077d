"""Rules command implementation."""
import sys
from typing import Optional

import typer

from unpkgify.core.converter_service import ConversionService


def rules_command(
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
):
    """List the active conversion rules in priority order."""

    exit_code = ConversionService().execute_rules_listing(config_path=config_path)

    if exit_code != 0:
        sys.exit(exit_code)
