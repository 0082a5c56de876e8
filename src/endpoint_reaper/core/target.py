"""Resolution of the three identifiers naming the endpoint to delete."""

from dataclasses import dataclass

from endpoint_reaper.core.errors import InputValidationError


@dataclass(frozen=True)
class EndpointTarget:
    """Fully-qualified online endpoint.

    Build instances with resolve_target(), which guarantees every field is non-empty.
    """

    endpoint_name: str
    resource_group: str
    workspace_name: str


def resolve_target(
    endpoint_name: str | None,
    resource_group: str | None,
    workspace_name: str | None,
) -> EndpointTarget:
    """Validate raw inputs and bundle them into an EndpointTarget.

    Values are taken as-is: no trimming, defaulting or naming-rule checks. The
    Azure CLI stays the authority on what a valid name is.

    Raises:
        InputValidationError: On the first missing input, in argument order
    """
    if not endpoint_name:
        raise InputValidationError("Endpoint name is required.")
    if not resource_group:
        raise InputValidationError("Resource group is required.")
    if not workspace_name:
        raise InputValidationError("Workspace name is required.")

    return EndpointTarget(
        endpoint_name=endpoint_name,
        resource_group=resource_group,
        workspace_name=workspace_name,
    )
