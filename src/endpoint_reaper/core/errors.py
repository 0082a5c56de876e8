"""Errors raised while reaping an endpoint.

Each error carries a one-line, user-facing message. The CLI is the only error
boundary: it reports the message and exits non-zero.
"""


class ReaperError(Exception):
    """Base class for every failure that ends a run."""


class InputValidationError(ReaperError):
    """A required input is absent or empty."""


class PrerequisiteMissingError(ReaperError):
    """The resource group or workspace scoping the endpoint does not exist."""


class ProbeInconclusiveError(ReaperError):
    """An existence probe failed for a reason other than "not found".

    Only raised when strict probes are enabled.
    """


class DeletionFailedError(ReaperError):
    """The endpoint exists but the delete command failed."""
