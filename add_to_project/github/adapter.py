"""GitHub project client adapter for the githubkit library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit.exception import GraphQLFailed, RequestError, RequestFailed
from pydantic import ValidationError

from add_to_project.configuration.exceptions import ProjectNotFoundError
from add_to_project.utils.constants import DEFAULT_GITHUB_API_URL, PROJECT_ITEMS_PAGE_SIZE
from add_to_project.utils.github import ProjectRef

from .abc import ProjectsClientBase
from .client import GitHubClient, get_github_client
from .exceptions import RemoteCallError
from .models import ProjectItemsPage
from .queries import (
    ADD_PROJECT_ITEM_MUTATION,
    DELETE_PROJECT_ITEM_MUTATION,
    get_project_query,
    list_project_items_query,
)

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def _graphql_error_types(exc: GraphQLFailed) -> list[str]:
    """Collect the error types reported in a failed GraphQL response."""
    errors = getattr(exc.response, "errors", None) or []
    return [error_type for error_type in (getattr(error, "type", None) for error in errors) if error_type]


def handle_graphql_errors(func: F) -> F:
    """Decorator to log failed GitHub API calls and raise them as RemoteCallError."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except GraphQLFailed as exc:
            logger.error(
                "GitHub GraphQL query failed",
                function=func.__name__,
                error_types=_graphql_error_types(exc),
                error=str(exc),
            )
            raise RemoteCallError(func.__name__, str(exc)) from exc
        except RequestFailed as exc:
            logger.error(
                "GitHub API request failed",
                function=func.__name__,
                status_code=exc.response.status_code,
                url=getattr(exc.response, "url", None),
            )
            raise RemoteCallError(func.__name__, f"HTTP {exc.response.status_code}") from exc
        except RequestError as exc:
            logger.error(
                "GitHub API request could not be completed",
                function=func.__name__,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise RemoteCallError(func.__name__, str(exc)) from exc
        except (KeyError, TypeError, ValidationError) as exc:
            logger.error(
                "Unexpected GitHub API response",
                function=func.__name__,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise RemoteCallError(func.__name__, f"unexpected response: {exc}") from exc

    return wrapper  # type: ignore


class GitHubKitProjectsAdapter(ProjectsClientBase):
    """GitHub project client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient) -> None:
        """Initialize the adapter with an already-initialized client."""
        self.client = client

    @classmethod
    async def create(cls, github_token: str, github_api_url: str = DEFAULT_GITHUB_API_URL) -> Self:
        """Create a new GitHub project client adapter.

        Args:
            github_token: Token used to authenticate GraphQL calls
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitProjectsAdapter instance
        """
        logger.info("Creating client for GitHub instance", github_api_url=github_api_url)
        client = await get_github_client(github_token=github_token, github_api_url=github_api_url)
        return cls(client)

    @handle_graphql_errors
    async def get_project_id(self, project: ProjectRef) -> str:
        """Get the node ID of a project."""
        try:
            data: dict[str, Any] = await self.client.async_graphql(
                get_project_query(project.query_root),
                {
                    "projectOwnerName": project.owner_name,
                    "projectNumber": project.project_number,
                },
            )
        except GraphQLFailed as exc:
            if "NOT_FOUND" in _graphql_error_types(exc):
                raise ProjectNotFoundError(project.owner_name, project.project_number) from exc
            raise

        owner = data.get(project.query_root)
        project_data = owner.get("projectV2") if owner else None
        if not project_data or not project_data.get("id"):
            raise ProjectNotFoundError(project.owner_name, project.project_number)

        project_id: str = project_data["id"]
        logger.debug("Resolved project node ID", project_id=project_id, project_number=project.project_number)
        return project_id

    @handle_graphql_errors
    async def add_item(self, project_id: str, content_id: str) -> str:
        """Add an issue or pull request to a project, returning the new item's ID."""
        data: dict[str, Any] = await self.client.async_graphql(
            ADD_PROJECT_ITEM_MUTATION,
            {"input": {"projectId": project_id, "contentId": content_id}},
        )
        item_id: str = data["addProjectV2ItemById"]["item"]["id"]
        return item_id

    @handle_graphql_errors
    async def list_project_items(self, project: ProjectRef, cursor: str | None = None) -> ProjectItemsPage:
        """List one page of a project's items, starting after the cursor."""
        data: dict[str, Any] = await self.client.async_graphql(
            list_project_items_query(project.query_root),
            {
                "projectOwnerName": project.owner_name,
                "projectNumber": project.project_number,
                "first": PROJECT_ITEMS_PAGE_SIZE,
                "after": cursor,
            },
        )
        owner = data.get(project.query_root)
        project_data = owner.get("projectV2") if owner else None
        if not project_data:
            raise ProjectNotFoundError(project.owner_name, project.project_number)
        return ProjectItemsPage.model_validate(project_data["items"])

    @handle_graphql_errors
    async def delete_item(self, project_id: str, item_id: str) -> str:
        """Delete an item from a project, returning the deleted item's ID."""
        data: dict[str, Any] = await self.client.async_graphql(
            DELETE_PROJECT_ITEM_MUTATION,
            {"input": {"projectId": project_id, "itemId": item_id}},
        )
        deleted_item_id: str = data["deleteProjectV2Item"]["deletedItemId"]
        return deleted_item_id
