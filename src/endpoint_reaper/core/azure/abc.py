"""Abstract base class for Azure CLI operations."""

from abc import ABC, abstractmethod

from endpoint_reaper.core.azure.types import DeleteResult, ProbeResult


class AzureCli(ABC):
    """Abstract interface for the Azure CLI calls endpoint-reaper makes.

    This interface enables dependency injection for testing. The real
    implementation shells out to `az`; the fake is pure in-memory.

    Probes never raise on command failure: every outcome, including a missing
    `az` binary, is folded into the returned ProbeResult / DeleteResult.
    """

    @abstractmethod
    def show_resource_group(self, resource_group: str) -> ProbeResult:
        """Check whether a resource group exists.

        Args:
            resource_group: Resource group name

        Returns:
            ProbeResult for `az group show`
        """
        ...

    @abstractmethod
    def show_workspace(self, resource_group: str, workspace_name: str) -> ProbeResult:
        """Check whether an Azure ML workspace exists in a resource group.

        Args:
            resource_group: Resource group containing the workspace
            workspace_name: Workspace name

        Returns:
            ProbeResult for `az ml workspace show`
        """
        ...

    @abstractmethod
    def show_online_endpoint(
        self, resource_group: str, workspace_name: str, endpoint_name: str
    ) -> ProbeResult:
        """Check whether an online endpoint exists in a workspace.

        Args:
            resource_group: Resource group containing the workspace
            workspace_name: Workspace containing the endpoint
            endpoint_name: Online endpoint name

        Returns:
            ProbeResult for `az ml online-endpoint show`
        """
        ...

    @abstractmethod
    def delete_online_endpoint(
        self, resource_group: str, workspace_name: str, endpoint_name: str
    ) -> DeleteResult:
        """Delete an online endpoint, blocking until az returns.

        Args:
            resource_group: Resource group containing the workspace
            workspace_name: Workspace containing the endpoint
            endpoint_name: Online endpoint name

        Returns:
            DeleteResult with succeeded=True only when az exited with status 0
        """
        ...
