"""Output utilities for CLI commands with clear intent.

user_output goes to stderr: progress, diagnostics and errors meant for people.
machine_output goes to stdout: lines meant to be parsed by the hosting
runner (e.g. GitHub Actions workflow commands).
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a human-facing line to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write a machine-readable line to stdout."""
    click.echo(message, nl=nl)
