"""Subprocess execution for az commands.

Non-zero exits are returned to the caller untouched; only failures to run the
command at all are raised, as RuntimeError carrying the operation and argv.
"""

import subprocess
from collections.abc import Sequence


def run_captured(
    cmd: Sequence[str],
    operation_context: str,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run cmd without a shell, capturing stdout and stderr as UTF-8 text.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        timeout: Seconds to wait before giving up, or None to wait indefinitely

    Returns:
        CompletedProcess, whatever its return code

    Raises:
        RuntimeError: If the binary is not found or the timeout expires
    """
    try:
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
            timeout=timeout,
        )

    except FileNotFoundError as e:
        cmd_str = " ".join(cmd)
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise RuntimeError(error_msg) from e

    except subprocess.TimeoutExpired as e:
        cmd_str = " ".join(cmd)
        error_msg = f"Timed out after {e.timeout}s while trying to {operation_context}"
        error_msg += f"\nCommand: {cmd_str}"
        raise RuntimeError(error_msg) from e
