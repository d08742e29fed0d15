"""Pydantic models for the GitHub Projects (V2) GraphQL responses."""

from pydantic import BaseModel, ConfigDict, Field


class ProjectItemContent(BaseModel):
    """The issue, pull request, or draft issue a project item links to."""

    # Content the token cannot see comes back as an empty object.
    id: str | None = None


class ProjectItem(BaseModel):
    """An item on a project board."""

    id: str
    content: ProjectItemContent | None = None

    @property
    def content_id(self) -> str | None:
        """Node ID of the linked content, if visible."""
        return self.content.id if self.content is not None else None


class PageInfo(BaseModel):
    """Cursor pagination details of a GraphQL connection."""

    model_config = ConfigDict(populate_by_name=True)

    has_next_page: bool = Field(alias="hasNextPage")
    end_cursor: str | None = Field(default=None, alias="endCursor")


class ProjectItemsPage(BaseModel):
    """One page of a project's items."""

    model_config = ConfigDict(populate_by_name=True)

    total_count: int = Field(default=0, alias="totalCount")
    page_info: PageInfo = Field(alias="pageInfo")
    nodes: list[ProjectItem | None] = Field(default_factory=list)

    @property
    def items(self) -> list[ProjectItem]:
        """Items of the page, skipping nodes GitHub returned as null."""
        return [node for node in self.nodes if node is not None]
