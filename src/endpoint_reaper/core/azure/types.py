"""Result types returned by Azure CLI operations."""

from dataclasses import dataclass
from enum import Enum


class ProbeStatus(Enum):
    """What an existence probe learned about a resource."""

    EXISTS = "exists"
    NOT_FOUND = "not_found"
    # The command failed for some other reason (auth, network, missing az, ...)
    INCONCLUSIVE = "inconclusive"


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a single `az ... show` invocation.

    stdout and stderr are the text captured from that one invocation. When az
    could not be executed at all, stderr holds the execution error instead.
    """

    status: ProbeStatus
    stdout: str
    stderr: str

    @property
    def exists(self) -> bool:
        return self.status is ProbeStatus.EXISTS


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of a single `az ml online-endpoint delete` invocation."""

    succeeded: bool
    stdout: str
    stderr: str
