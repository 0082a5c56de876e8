"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from endpoint_reaper.cli.config import LoadedConfig, load_config, resolve_config_path
from endpoint_reaper.core.azure.abc import AzureCli
from endpoint_reaper.core.azure.real import RealAzureCli
from endpoint_reaper.core.user_feedback import InteractiveFeedback, UserFeedback


@dataclass(frozen=True)
class ReaperContext:
    """Immutable context holding all dependencies for a reaper run.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    azure: AzureCli
    feedback: UserFeedback
    config: LoadedConfig


def create_context(cwd: Path | None = None) -> ReaperContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.
    """
    if cwd is None:
        cwd = Path.cwd()
    config = load_config(resolve_config_path(cwd))
    return ReaperContext(
        azure=RealAzureCli(
            executable=config.az_executable,
            timeout_seconds=config.timeout_seconds,
        ),
        feedback=InteractiveFeedback(),
        config=config,
    )
