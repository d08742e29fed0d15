"""Orchestrates adding an issue or pull request to, or removing it from, a project."""

import structlog

from add_to_project.configuration.models import ActionConfig
from add_to_project.github.abc import ProjectsClientBase
from add_to_project.github.adapter import GitHubKitProjectsAdapter
from add_to_project.github.models import ProjectItem
from add_to_project.synchronize.filters import decide
from add_to_project.synchronize.models import EventContext, FilterConfig, ProjectItemDecision
from add_to_project.synchronize.results import AddToProjectResult
from add_to_project.utils.actions import warning_annotation
from add_to_project.utils.github import ProjectRef, parse_project_url

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def find_project_item(client: ProjectsClientBase, project: ProjectRef, content_id: str) -> ProjectItem | None:
    """Walk the project's items page by page until one links to the given content."""
    cursor: str | None = None
    pages = 0
    while True:
        page = await client.list_project_items(project, cursor)
        pages += 1
        for item in page.items:
            if item.content_id == content_id:
                logger.debug("Found project item", item_id=item.id, content_id=content_id, pages=pages)
                return item

        if not page.page_info.has_next_page:
            break
        # A page claiming more results must hand back a fresh cursor, or the walk would repeat itself.
        if page.page_info.end_cursor is None or page.page_info.end_cursor == cursor:
            logger.warning(
                "Project items pagination did not advance, stopping",
                project_number=project.project_number,
                cursor=cursor,
                pages=pages,
            )
            break
        cursor = page.page_info.end_cursor

    logger.debug("Project item not found", content_id=content_id, pages=pages)
    return None


async def run_add_to_project_workflow(
    project_url: str,
    event: EventContext,
    filters: FilterConfig,
    client: ProjectsClientBase,
) -> AddToProjectResult:
    """Run the add-to-project workflow for one event.

    Filtering happens before any remote call, so a skipped item never touches
    the GitHub API.
    """
    decision = decide(event, filters)
    if decision is ProjectItemDecision.SKIP:
        return AddToProjectResult(decision)

    logger.debug("Project URL", project_url=project_url)
    project = parse_project_url(project_url)
    logger.debug(
        "Resolved project",
        owner=project.owner_name,
        owner_kind=project.owner_kind.value,
        project_number=project.project_number,
    )

    project_id = await client.get_project_id(project)
    logger.debug("Project node ID", project_id=project_id, content_id=event.node_id)

    if decision is ProjectItemDecision.REMOVE:
        item = await find_project_item(client, project, event.node_id)
        if item is None:
            message = f"Could not find Project Item linked to {event.item_kind.replace('_', ' ')} {event.node_id}"
            logger.warning(message, item_number=event.item_number, project_number=project.project_number)
            warning_annotation(message)
            return AddToProjectResult(decision)

        deleted_item_id = await client.delete_item(project_id, item.id)
        logger.info(
            "Removed item from project",
            item_number=event.item_number,
            deleted_item_id=deleted_item_id,
            project_number=project.project_number,
        )
        return AddToProjectResult(decision, deleted_item_id=deleted_item_id)

    item_id = await client.add_item(project_id, event.node_id)
    logger.info(
        "Added item to project",
        item_number=event.item_number,
        item_id=item_id,
        project_number=project.project_number,
    )
    return AddToProjectResult(decision, item_id=item_id)


async def run_action(config: ActionConfig, event: EventContext) -> AddToProjectResult:
    """Run the workflow with a githubkit client built from the action configuration."""
    client = await GitHubKitProjectsAdapter.create(github_token=config.github_token, github_api_url=config.github_api_url)
    return await run_add_to_project_workflow(
        project_url=config.project_url,
        event=event,
        filters=config.filters,
        client=client,
    )
