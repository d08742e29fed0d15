"""Base ABC for GitHub project clients."""

from abc import ABC, abstractmethod

from add_to_project.github.models import ProjectItemsPage
from add_to_project.utils.github import ProjectRef


class ProjectsClientBase(ABC):
    """Base ABC for the project board operations a single run needs."""

    @abstractmethod
    async def get_project_id(self, project: ProjectRef) -> str:
        """Get the node ID of a project."""
        pass

    @abstractmethod
    async def add_item(self, project_id: str, content_id: str) -> str:
        """Add an issue or pull request to a project, returning the new item's ID."""
        pass

    @abstractmethod
    async def list_project_items(self, project: ProjectRef, cursor: str | None = None) -> ProjectItemsPage:
        """List one page of a project's items, starting after the cursor."""
        pass

    @abstractmethod
    async def delete_item(self, project_id: str, item_id: str) -> str:
        """Delete an item from a project, returning the deleted item's ID."""
        pass
