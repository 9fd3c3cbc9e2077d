"""
Convert command implementation.

Thin wrapper around ConversionService that handles CLI argument parsing
and delegates the work to the service layer.
"""
import sys
from typing import Optional

import typer

from unpkgify.core.converter_service import ConversionService


def convert_command(
    text: Optional[str] = typer.Argument(None, help="Text to convert; omit or pass '-' to read standard input"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    output_format: Optional[str] = typer.Option(None, "-f", "--format", help="Output format: text or json"),
    show_labels: Optional[bool] = typer.Option(None, "-l", "--labels/--no-labels", help="Prefix each line with its label"),
):
    """Convert npm package references into unpkg CDN URLs."""

    service = ConversionService()
    exit_code, _ = service.execute_conversion(
        text=text,
        config_path=config_path,
        output_format=output_format,
        show_labels=show_labels,
    )

    if exit_code != 0:
        sys.exit(exit_code)
