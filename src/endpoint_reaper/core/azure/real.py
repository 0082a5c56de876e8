"""Production implementation of Azure CLI operations."""

import logging

from endpoint_reaper.core.azure.abc import AzureCli
from endpoint_reaper.core.azure.types import DeleteResult, ProbeResult, ProbeStatus
from endpoint_reaper.core.subprocess import run_captured

logger = logging.getLogger(__name__)

# Fragments az prints on stderr when the queried resource does not exist.
NOT_FOUND_MARKERS = (
    "ResourceNotFound",
    "ResourceGroupNotFound",
    "could not be found",
    "was not found",
)


def classify_probe_failure(stderr: str) -> ProbeStatus:
    """Map the stderr of a failed `show` command to NOT_FOUND or INCONCLUSIVE."""
    if any(marker in stderr for marker in NOT_FOUND_MARKERS):
        return ProbeStatus.NOT_FOUND
    return ProbeStatus.INCONCLUSIVE


class RealAzureCli(AzureCli):
    """Production implementation using the az CLI.

    Every command runs without a shell, with stdout and stderr captured so
    nothing is streamed to the console.
    """

    def __init__(self, executable: str = "az", timeout_seconds: float | None = None) -> None:
        """Initialize RealAzureCli.

        Args:
            executable: az binary to invoke
            timeout_seconds: Per-command timeout, or None to wait indefinitely
        """
        self._executable = executable
        self._timeout_seconds = timeout_seconds

    def show_resource_group(self, resource_group: str) -> ProbeResult:
        return self._probe(
            ["group", "show", "--name", resource_group],
            f"show resource group '{resource_group}'",
        )

    def show_workspace(self, resource_group: str, workspace_name: str) -> ProbeResult:
        return self._probe(
            [
                "ml",
                "workspace",
                "show",
                "--name",
                workspace_name,
                "--resource-group",
                resource_group,
            ],
            f"show workspace '{workspace_name}'",
        )

    def show_online_endpoint(
        self, resource_group: str, workspace_name: str, endpoint_name: str
    ) -> ProbeResult:
        return self._probe(
            [
                "ml",
                "online-endpoint",
                "show",
                "--name",
                endpoint_name,
                "--resource-group",
                resource_group,
                "--workspace-name",
                workspace_name,
            ],
            f"show online endpoint '{endpoint_name}'",
        )

    def delete_online_endpoint(
        self, resource_group: str, workspace_name: str, endpoint_name: str
    ) -> DeleteResult:
        """Delete the endpoint.

        `--yes` skips az's interactive confirmation, which would otherwise block
        or fail in a non-interactive runner.
        """
        cmd = [
            self._executable,
            "ml",
            "online-endpoint",
            "delete",
            "--name",
            endpoint_name,
            "--resource-group",
            resource_group,
            "--workspace-name",
            workspace_name,
            "--yes",
        ]
        logger.debug("Running: %s", cmd)
        try:
            result = run_captured(
                cmd,
                operation_context=f"delete online endpoint '{endpoint_name}'",
                timeout=self._timeout_seconds,
            )
        except RuntimeError as e:
            # az missing or timed out
            logger.debug("Delete could not run: %s", e)
            return DeleteResult(succeeded=False, stdout="", stderr=str(e))

        logger.debug("Delete exited with %d", result.returncode)
        return DeleteResult(
            succeeded=result.returncode == 0,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )

    def _probe(self, args: list[str], operation_context: str) -> ProbeResult:
        cmd = [self._executable, *args]
        logger.debug("Running: %s", cmd)
        try:
            result = run_captured(
                cmd,
                operation_context=operation_context,
                timeout=self._timeout_seconds,
            )
        except RuntimeError as e:
            logger.debug("Probe could not run: %s", e)
            return ProbeResult(status=ProbeStatus.INCONCLUSIVE, stdout="", stderr=str(e))

        stdout = result.stdout or ""
        stderr = result.stderr or ""
        logger.debug("Probe exited with %d", result.returncode)
        if result.returncode == 0:
            return ProbeResult(status=ProbeStatus.EXISTS, stdout=stdout, stderr=stderr)
        return ProbeResult(status=classify_probe_failure(stderr), stdout=stdout, stderr=stderr)
