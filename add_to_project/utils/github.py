"""Contains utility functions for GitHub interactions."""

from dataclasses import dataclass
from enum import Enum

from add_to_project.configuration.exceptions import InvalidUrlError, UnsupportedOwnerKindError
from add_to_project.utils.constants import PROJECT_URL_FORMAT, PROJECT_URL_PATTERN


class OwnerKind(str, Enum):
    """Kind of account owning a project, valued by its GraphQL query root."""

    ORGANIZATION = "organization"
    USER = "user"


@dataclass(frozen=True)
class ProjectRef:
    """Coordinates of a project board parsed from its URL."""

    owner_kind: OwnerKind
    owner_name: str
    project_number: int
    host: str = "github.com"

    @property
    def query_root(self) -> str:
        """Name of the GraphQL field the project is looked up under."""
        return self.owner_kind.value


def resolve_owner_kind_query_root(owner_type: str | None) -> OwnerKind:
    """Map the owner segment of a project URL ('orgs' or 'users') to its owner kind."""
    if owner_type == "orgs":
        return OwnerKind.ORGANIZATION
    if owner_type == "users":
        return OwnerKind.USER
    raise UnsupportedOwnerKindError(owner_type)


def parse_project_url(url: str) -> ProjectRef:
    """Parse a project URL such as https://github.com/orgs/acme/projects/7.

    Any host is accepted so that GitHub Enterprise Server projects resolve
    the same way as github.com ones.

    Raises:
        InvalidUrlError: If the URL does not point at an organization or user project.
        UnsupportedOwnerKindError: If the owner segment cannot be resolved.
    """
    match = PROJECT_URL_PATTERN.match(url.strip())
    if match is None:
        raise InvalidUrlError(url, PROJECT_URL_FORMAT)

    project_number = int(match.group("project_number"))
    if project_number < 1:
        raise InvalidUrlError(url, PROJECT_URL_FORMAT)

    return ProjectRef(
        owner_kind=resolve_owner_kind_query_root(match.group("owner_type")),
        owner_name=match.group("owner_name"),
        project_number=project_number,
        host=match.group("host"),
    )
