"""Host failure reporting.

Every fatal outcome of a run passes through report_failure exactly once, which
prints a single styled line and, when running inside GitHub Actions, emits an
`::error::` workflow command so the runner annotates the step as failed.
"""

import os
from typing import NoReturn

import click

from endpoint_reaper.cli.output import machine_output, user_output


def running_in_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def escape_workflow_data(message: str) -> str:
    """Escape a message for use as workflow command data.

    Matches the escaping done by the Actions toolkit: %, CR and LF.
    """
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def report_failure(message: str) -> NoReturn:
    """Report a fatal error to the host and exit with status 1.

    Args:
        message: One-line description of what failed

    Raises:
        SystemExit: Always (with exit code 1)
    """
    user_output(click.style("Error: ", fg="red") + f"Action failed: {message}")
    if running_in_github_actions():
        machine_output(f"::error::{escape_workflow_data(f'❌ Action failed: {message}')}")
    raise SystemExit(1)
