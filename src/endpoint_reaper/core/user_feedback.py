"""User-facing progress output."""

from abc import ABC, abstractmethod

import click

from endpoint_reaper.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing progress and diagnostic output.

    The reaper reports every step through ctx.feedback instead of printing,
    which lets tests capture the exact lines a run produced.

    Usage:
        ctx.feedback.info("🔹 Checking if resource group 'rg1' exists...")
        ctx.feedback.success("✅ Resource group 'rg1' exists.")
        ctx.feedback.error("❌ Resource group not found or error occurred: ...")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to the console."""

    def info(self, message: str) -> None:
        """Show informational message."""
        user_output(message)

    def success(self, message: str) -> None:
        """Show success message in green."""
        user_output(click.style(message, fg="green"))

    def error(self, message: str) -> None:
        """Show error message in red."""
        user_output(click.style(message, fg="red"))
