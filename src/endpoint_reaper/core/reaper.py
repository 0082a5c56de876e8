"""Check for an online endpoint and delete it when present.

The run is a short, strictly sequential state machine:

    resource group -> workspace -> endpoint -> (absent: done | present: delete)

Each step only starts after the previous one confirmed its resource exists.
Nothing is retried; the first missing prerequisite ends the run.
"""

import logging
from enum import Enum

from endpoint_reaper.core.azure.types import ProbeResult, ProbeStatus
from endpoint_reaper.core.context import ReaperContext
from endpoint_reaper.core.errors import (
    DeletionFailedError,
    PrerequisiteMissingError,
    ProbeInconclusiveError,
)
from endpoint_reaper.core.target import EndpointTarget

logger = logging.getLogger(__name__)


class ReapOutcome(Enum):
    """Successful terminal states of a run."""

    ALREADY_ABSENT = "already_absent"
    DELETED = "deleted"


def reap_endpoint(ctx: ReaperContext, target: EndpointTarget) -> ReapOutcome:
    """Delete target's endpoint if it exists.

    Returns:
        ReapOutcome.ALREADY_ABSENT when there was nothing to delete,
        ReapOutcome.DELETED when the endpoint was deleted

    Raises:
        PrerequisiteMissingError: Resource group or workspace does not exist
        ProbeInconclusiveError: A probe failed for an unrelated reason (strict probes only)
        DeletionFailedError: The delete command failed
    """
    rg = target.resource_group
    ws = target.workspace_name
    ep = target.endpoint_name

    ctx.feedback.info(f"🔹 Checking if resource group '{rg}' exists...")
    rg_probe = ctx.azure.show_resource_group(rg)
    if not _report_probe(ctx, rg_probe, "Resource group"):
        raise PrerequisiteMissingError(f"Resource group '{rg}' does not exist.")
    ctx.feedback.success(f"✅ Resource group '{rg}' exists.")

    ctx.feedback.info(f"🔹 Checking if workspace '{ws}' exists in resource group '{rg}'...")
    ws_probe = ctx.azure.show_workspace(rg, ws)
    if not _report_probe(ctx, ws_probe, "Workspace"):
        raise PrerequisiteMissingError(
            f"Workspace '{ws}' does not exist in resource group '{rg}'."
        )
    ctx.feedback.success(f"✅ Workspace '{ws}' exists in resource group '{rg}'.")

    ctx.feedback.info(f"🔹 Checking if endpoint '{ep}' exists...")
    ep_probe = ctx.azure.show_online_endpoint(rg, ws, ep)
    if not _report_probe(ctx, ep_probe, "Endpoint"):
        ctx.feedback.success(
            f"✅ Endpoint '{ep}' does not exist in resource group '{rg}' "
            f"and workspace '{ws}'."
        )
        return ReapOutcome.ALREADY_ABSENT

    ctx.feedback.info(f"🔹 Deleting endpoint '{ep}'...")
    deleted = ctx.azure.delete_online_endpoint(rg, ws, ep)
    if not deleted.succeeded:
        ctx.feedback.error(
            f"❌ Endpoint not deleted, error occurred: {_diagnostic(deleted.stderr)}"
        )
        raise DeletionFailedError(f"Failed to delete endpoint '{ep}'.")

    if deleted.stdout.strip():
        ctx.feedback.info(f"Output: {deleted.stdout.strip()}")
    ctx.feedback.success(f"✅ Endpoint '{ep}' deleted successfully.")
    return ReapOutcome.DELETED


def _report_probe(ctx: ReaperContext, probe: ProbeResult, kind: str) -> bool:
    """Log a probe's captured output and decide whether the resource exists.

    An inconclusive probe reads as "does not exist" unless strict probes are
    enabled, in which case it is fatal.
    """
    logger.debug("%s probe: %s", kind, probe.status.value)

    if probe.exists:
        ctx.feedback.info(f"✅ {kind} found. Output: {probe.stdout.strip()}")
        return True

    if probe.status is ProbeStatus.INCONCLUSIVE and ctx.config.strict_probes:
        ctx.feedback.error(f"❌ {kind} probe failed: {_diagnostic(probe.stderr)}")
        raise ProbeInconclusiveError(
            f"Could not determine whether {kind.lower()} exists: "
            f"{_first_line(probe.stderr) or 'az exited with an error'}"
        )

    ctx.feedback.error(f"❌ {kind} not found or error occurred: {_diagnostic(probe.stderr)}")
    return False


def _diagnostic(stderr: str) -> str:
    return stderr.strip() or "no error output"


def _first_line(text: str) -> str:
    stripped = text.strip()
    if not stripped:
        return ""
    return stripped.splitlines()[0]
