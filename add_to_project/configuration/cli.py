"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
from pathlib import Path

import structlog
import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from add_to_project.configuration.env import get_settings
from add_to_project.configuration.exceptions import ConfigurationError, EventPayloadError
from add_to_project.configuration.reconcile import reconcile_action_configuration
from add_to_project.github.event import build_event_context, load_event_payload
from add_to_project.github.exceptions import RemoteCallError
from add_to_project.synchronize.driver import run_action
from add_to_project.utils.actions import error_annotation, set_output
from add_to_project.utils.constants import DELETED_ITEM_ID_OUTPUT, ITEM_ID_OUTPUT
from add_to_project.utils.logging import configure_logging

load_dotenv()

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

typer_app = typer.Typer(pretty_exceptions_show_locals=False, add_completion=False)


@typer_app.command(name="add-to-project")
def add_to_project_cli(
    project_url: Annotated[str | None, Option(envvar="INPUT_PROJECT_URL", help="URL of the project to add issues to.")] = None,
    github_token: Annotated[
        str | None, Option(envvar="INPUT_GITHUB_TOKEN", help="Token with permission to read and write the project.", show_default=False)
    ] = None,
    labeled: Annotated[str, Option(envvar="INPUT_LABELED", help="Comma-separated list of labels to filter issues by.")] = "",
    label_operator: Annotated[str, Option(envvar="INPUT_LABEL_OPERATOR", help="How labels are matched: and, or, not.")] = "or",
    milestoned: Annotated[str, Option(envvar="INPUT_MILESTONED", help="Comma-separated list of milestones to filter issues by.")] = "",
    remove_unmatched: Annotated[
        str, Option(envvar="INPUT_REMOVE_UNMATCHED", help="Remove issues from the project when their milestone no longer matches ('true').")
    ] = "false",
    fuzzy_match: Annotated[str, Option(envvar="INPUT_FUZZY_MATCH", help="Match milestones by prefix ('true').")] = "false",
    event_path: Annotated[Path | None, Option(envvar="GITHUB_EVENT_PATH", help="Path to the webhook event payload.")] = None,
    debug: Annotated[bool, Option(envvar="RUNNER_DEBUG", help="Enable debug logging.")] = False,
) -> None:
    """Adds an issue or pull request to a project, or removes it, based on label and milestone filters."""
    settings = get_settings()
    debug = debug or settings.RUNNER_DEBUG
    configure_logging(debug=debug)

    try:
        config = reconcile_action_configuration(
            project_url=project_url,
            github_token=github_token,
            labeled=labeled,
            label_operator=label_operator,
            milestoned=milestoned,
            remove_unmatched=remove_unmatched,
            fuzzy_match=fuzzy_match,
            github_api_url=settings.GITHUB_API_URL,
            debug=debug,
        )
        event_path = event_path or settings.GITHUB_EVENT_PATH
        if event_path is None:
            raise EventPayloadError("No event payload available. Set GITHUB_EVENT_PATH or pass --event-path.")
        event = build_event_context(load_event_payload(event_path))

        result = asyncio.run(run_action(config, event))
    except (ConfigurationError, RemoteCallError) as exc:
        logger.error("add-to-project failed", error=str(exc), error_type=type(exc).__name__)
        error_annotation(str(exc))
        raise typer.Exit(1) from exc

    if result.item_id is not None:
        set_output(ITEM_ID_OUTPUT, result.item_id, settings.GITHUB_OUTPUT)
    if result.deleted_item_id is not None:
        set_output(DELETED_ITEM_ID_OUTPUT, result.deleted_item_id, settings.GITHUB_OUTPUT)


if __name__ == "__main__":
    typer_app()
