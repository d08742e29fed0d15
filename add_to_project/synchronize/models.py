"""Models for deciding what happens to an issue or pull request on a project board."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal


class ProjectItemDecision(Enum):
    """Enum for project item decisions."""

    SKIP = "skip"
    ADD = "add"
    REMOVE = "remove"


class LabelOperator(str, Enum):
    """How the configured labels are matched against an item's labels."""

    AND = "and"
    OR = "or"
    NOT = "not"

    @classmethod
    def from_input(cls, value: str | None) -> "LabelOperator":
        """Parse a label-operator input, falling back to OR for anything unrecognized."""
        normalized = (value or "").strip().lower()
        for operator in cls:
            if operator.value == normalized:
                return operator
        return cls.OR


@dataclass(frozen=True)
class EventContext:
    """The issue or pull request a webhook event was delivered for."""

    node_id: str
    item_number: int | None = None
    labels: frozenset[str] = field(default_factory=frozenset)
    milestone_title: str | None = None
    repository_owner_login: str | None = None
    item_kind: Literal["issue", "pull_request"] = "issue"


@dataclass(frozen=True)
class FilterConfig:
    """Label and milestone filters deciding whether an item belongs on the project."""

    label_filter: tuple[str, ...] = ()
    label_operator: LabelOperator = LabelOperator.OR
    milestone_filter: tuple[str, ...] = ()
    remove_unmatched: bool = False
    fuzzy_match: bool = False
