import logging
import os

import click

from endpoint_reaper.cli.failure import report_failure
from endpoint_reaper.core.context import ReaperContext, create_context
from endpoint_reaper.core.errors import ReaperError
from endpoint_reaper.core.reaper import reap_endpoint
from endpoint_reaper.core.target import resolve_target

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "ENDPOINT_REAPER_DEBUG"


@click.command("endpoint-reaper", context_settings=CONTEXT_SETTINGS)
@click.option(
    "--endpoint-name",
    envvar="INPUT_ENDPOINT_NAME",
    default="",
    help="Online endpoint to delete. [env: INPUT_ENDPOINT_NAME]",
)
@click.option(
    "--resource-group",
    envvar="INPUT_RESOURCE_GROUP",
    default="",
    help="Resource group containing the workspace. [env: INPUT_RESOURCE_GROUP]",
)
@click.option(
    "--workspace-name",
    envvar="INPUT_WORKSPACE_NAME",
    default="",
    help="Azure ML workspace containing the endpoint. [env: INPUT_WORKSPACE_NAME]",
)
@click.version_option(package_name="endpoint-reaper")
@click.pass_context
def cli(ctx: click.Context, endpoint_name: str, resource_group: str, workspace_name: str) -> None:
    """Delete an Azure ML online endpoint if it exists.

    Verifies the resource group and workspace first. A missing endpoint is
    not an error: the command exits 0 without deleting anything.
    """
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except click.ClickException as e:
            report_failure(e.format_message())
    reaper_ctx: ReaperContext = ctx.obj

    try:
        target = resolve_target(endpoint_name, resource_group, workspace_name)
        outcome = reap_endpoint(reaper_ctx, target)
    except ReaperError as e:
        logger.debug("Run failed", exc_info=True)
        report_failure(str(e))

    logger.debug("Run finished: %s", outcome.value)


def main() -> None:
    """CLI entry point used by the `endpoint-reaper` console script."""
    if os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    cli()
