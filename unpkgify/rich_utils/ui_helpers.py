import os
import sys
from typing import Iterable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from unpkgify.models import ConversionResult
from unpkgify.rules import ConversionRule


def is_ci_environment():
    return (
        os.getenv('CI') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        not sys.stdout.isatty()
    )


def get_console(stderr: bool = False) -> Console:
    """Detect environment and create console."""
    if is_ci_environment():
        # CI/automated environment - no colors, no interactive elements
        return Console(force_terminal=False, no_color=True, stderr=stderr)
    return Console(stderr=stderr)


def print_plain(console: Console, text: str) -> None:
    """Print text verbatim: no markup, highlighting or wrapping."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def render_lines(console: Console, result: ConversionResult, show_labels: bool = False) -> None:
    """Print each output line, optionally preceded by its label title."""
    for line in result:
        if show_labels:
            print_plain(console, f"{line.label.display_name}: {line.url}")
        else:
            print_plain(console, line.display())


def render_rules_table(console: Console, rules: Iterable[ConversionRule], converter) -> None:
    """Print the active rules in priority order with a converted sample each."""
    table = Table(title="Active conversion rules")
    table.add_column("#", justify="right")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Matches")
    table.add_column("Sample")
    table.add_column("Output", style="green")

    for priority, rule in enumerate(rules, start=1):
        output = "\n".join(line.display() for line in converter.convert(rule.sample))
        # rule descriptions contain "[...]", which rich would parse as markup
        table.add_row(
            str(priority),
            Text(rule.name.value),
            Text(rule.description),
            Text(rule.sample),
            Text(output),
        )

    console.print(table)
