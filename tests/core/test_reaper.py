"""Tests for the reap_endpoint state machine.

The Azure layer is replaced by FakeAzureCli; these tests trust the fake (see
tests/unit/fakes/test_fake_azure_cli.py) and only check sequencing, outcomes
and reported messages.
"""

import pytest

from endpoint_reaper.core.errors import (
    DeletionFailedError,
    PrerequisiteMissingError,
    ProbeInconclusiveError,
)
from endpoint_reaper.core.reaper import ReapOutcome, reap_endpoint
from endpoint_reaper.core.target import resolve_target
from tests.fakes.azure_cli import FakeAzureCli
from tests.fakes.context import create_test_context
from tests.fakes.user_feedback import FakeUserFeedback

TARGET = resolve_target("ep1", "rg1", "ws1")


def _azure(**kwargs) -> FakeAzureCli:
    defaults: dict = {
        "resource_groups": {"rg1"},
        "workspaces": {("rg1", "ws1")},
        "endpoints": set(),
    }
    defaults.update(kwargs)
    return FakeAzureCli(**defaults)


def test_missing_resource_group_stops_before_workspace() -> None:
    azure = _azure(resource_groups=set())
    ctx = create_test_context(azure=azure)

    with pytest.raises(PrerequisiteMissingError, match="Resource group 'rg1' does not exist."):
        reap_endpoint(ctx, TARGET)

    assert azure.calls == [("group", "show", "rg1")]


def test_missing_workspace_stops_before_endpoint() -> None:
    azure = _azure(workspaces=set())
    ctx = create_test_context(azure=azure)

    with pytest.raises(
        PrerequisiteMissingError,
        match="Workspace 'ws1' does not exist in resource group 'rg1'.",
    ):
        reap_endpoint(ctx, TARGET)

    assert azure.calls == [
        ("group", "show", "rg1"),
        ("workspace", "show", "rg1", "ws1"),
    ]


def test_absent_endpoint_is_noop_success() -> None:
    azure = _azure()
    feedback = FakeUserFeedback()
    ctx = create_test_context(azure=azure, feedback=feedback)

    outcome = reap_endpoint(ctx, TARGET)

    assert outcome is ReapOutcome.ALREADY_ABSENT
    assert azure.delete_calls == []
    assert (
        "success",
        "✅ Endpoint 'ep1' does not exist in resource group 'rg1' and workspace 'ws1'.",
    ) in feedback.messages


def test_present_endpoint_is_deleted() -> None:
    azure = _azure(endpoints={("rg1", "ws1", "ep1")})
    feedback = FakeUserFeedback()
    ctx = create_test_context(azure=azure, feedback=feedback)

    outcome = reap_endpoint(ctx, TARGET)

    assert outcome is ReapOutcome.DELETED
    assert azure.calls == [
        ("group", "show", "rg1"),
        ("workspace", "show", "rg1", "ws1"),
        ("online-endpoint", "show", "rg1", "ws1", "ep1"),
        ("online-endpoint", "delete", "rg1", "ws1", "ep1"),
    ]
    assert ("success", "✅ Endpoint 'ep1' deleted successfully.") in feedback.messages


def test_failed_delete_names_endpoint() -> None:
    azure = _azure(endpoints={("rg1", "ws1", "ep1")}, delete_succeeds=False)
    feedback = FakeUserFeedback()
    ctx = create_test_context(azure=azure, feedback=feedback)

    with pytest.raises(DeletionFailedError, match="Failed to delete endpoint 'ep1'."):
        reap_endpoint(ctx, TARGET)

    assert "InternalServerError" in feedback.text


def test_second_run_after_delete_is_noop() -> None:
    azure = _azure(endpoints={("rg1", "ws1", "ep1")})

    first = reap_endpoint(create_test_context(azure=azure), TARGET)
    second = reap_endpoint(create_test_context(azure=azure), TARGET)

    assert first is ReapOutcome.DELETED
    assert second is ReapOutcome.ALREADY_ABSENT
    assert len(azure.delete_calls) == 1


def test_repeated_runs_against_absent_endpoint_are_noops() -> None:
    azure = _azure()

    outcomes = [reap_endpoint(create_test_context(azure=azure), TARGET) for _ in range(2)]

    assert outcomes == [ReapOutcome.ALREADY_ABSENT, ReapOutcome.ALREADY_ABSENT]
    assert azure.delete_calls == []


def test_progress_lines_in_order() -> None:
    feedback = FakeUserFeedback()
    ctx = create_test_context(azure=_azure(), feedback=feedback)

    reap_endpoint(ctx, TARGET)

    progress = [message for level, message in feedback.messages if message.startswith("🔹")]
    assert progress == [
        "🔹 Checking if resource group 'rg1' exists...",
        "🔹 Checking if workspace 'ws1' exists in resource group 'rg1'...",
        "🔹 Checking if endpoint 'ep1' exists...",
    ]


def test_probe_failure_reports_captured_stderr() -> None:
    feedback = FakeUserFeedback()
    ctx = create_test_context(azure=_azure(resource_groups=set()), feedback=feedback)

    with pytest.raises(PrerequisiteMissingError):
        reap_endpoint(ctx, TARGET)

    errors = [message for level, message in feedback.messages if level == "error"]
    assert len(errors) == 1
    assert "ResourceNotFound" in errors[0]


# ============================================================================
# Inconclusive probes
# ============================================================================


def test_inconclusive_endpoint_probe_reads_as_absent_by_default() -> None:
    azure = _azure(endpoints={("rg1", "ws1", "ep1")}, inconclusive={"endpoint"})
    ctx = create_test_context(azure=azure)

    outcome = reap_endpoint(ctx, TARGET)

    assert outcome is ReapOutcome.ALREADY_ABSENT
    assert azure.delete_calls == []


def test_inconclusive_resource_group_probe_reads_as_missing_by_default() -> None:
    azure = _azure(inconclusive={"resource_group"})
    ctx = create_test_context(azure=azure)

    with pytest.raises(PrerequisiteMissingError):
        reap_endpoint(ctx, TARGET)


def test_strict_probes_make_inconclusive_endpoint_probe_fatal() -> None:
    azure = _azure(endpoints={("rg1", "ws1", "ep1")}, inconclusive={"endpoint"})
    ctx = create_test_context(azure=azure, strict_probes=True)

    with pytest.raises(ProbeInconclusiveError, match="Could not determine whether endpoint exists"):
        reap_endpoint(ctx, TARGET)

    assert azure.delete_calls == []


def test_strict_probes_still_accept_genuine_absence() -> None:
    azure = _azure()
    ctx = create_test_context(azure=azure, strict_probes=True)

    assert reap_endpoint(ctx, TARGET) is ReapOutcome.ALREADY_ABSENT


def test_strict_probes_inconclusive_workspace_stops_run() -> None:
    azure = _azure(inconclusive={"workspace"})
    ctx = create_test_context(azure=azure, strict_probes=True)

    with pytest.raises(ProbeInconclusiveError, match="az login"):
        reap_endpoint(ctx, TARGET)

    assert len(azure.calls) == 2
