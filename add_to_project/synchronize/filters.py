"""Decides whether an issue or pull request should be added to or removed from a project."""

from collections.abc import Iterable, Sequence

import structlog

from add_to_project.synchronize.models import EventContext, FilterConfig, LabelOperator, ProjectItemDecision

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def matches_labels(issue_labels: Iterable[str], label_filter: Sequence[str], operator: LabelOperator = LabelOperator.OR) -> bool:
    """Check an item's labels against the label filter, case-insensitively.

    AND requires every filtered label, NOT rejects any filtered label, and OR
    requires at least one. An empty filter matches every item.
    """
    present = {label.lower() for label in issue_labels}
    wanted = [label.lower() for label in label_filter]

    if operator is LabelOperator.AND:
        return all(label in present for label in wanted)
    if operator is LabelOperator.NOT:
        return not wanted or not any(label in present for label in wanted)
    return not wanted or any(label in present for label in wanted)


def matches_milestone(issue_milestone: str | None, milestone_filter: Sequence[str], fuzzy: bool = False) -> bool:
    """Check an item's milestone against the milestone filter.

    The filter is always OR: exact membership, or with fuzzy matching, a
    prefix match against any entry. An item without a milestone never matches
    a non-empty filter.
    """
    if not milestone_filter:
        return True
    if issue_milestone is None:
        return False
    if not fuzzy:
        return issue_milestone in milestone_filter
    return any(issue_milestone.startswith(milestone) for milestone in milestone_filter)


def decide(event: EventContext, filters: FilterConfig) -> ProjectItemDecision:
    """Decide whether to skip, add, or remove the event's item."""
    if not matches_labels(event.labels, filters.label_filter, filters.label_operator):
        logger.info(
            "Skipping item because its labels do not match the label filter",
            item_number=event.item_number,
            labels=sorted(event.labels),
            label_filter=list(filters.label_filter),
            label_operator=filters.label_operator.value,
        )
        return ProjectItemDecision.SKIP

    if filters.fuzzy_match:
        logger.debug("Using fuzzy matching for milestones")

    if filters.milestone_filter and not matches_milestone(event.milestone_title, filters.milestone_filter, filters.fuzzy_match):
        if filters.remove_unmatched:
            logger.info(
                "Removing item because its milestone is not one of the milestones",
                item_number=event.item_number,
                milestone=event.milestone_title,
                milestone_filter=list(filters.milestone_filter),
            )
            return ProjectItemDecision.REMOVE
        logger.info(
            "Skipping item because its milestone is not one of the milestones",
            item_number=event.item_number,
            milestone=event.milestone_title,
            milestone_filter=list(filters.milestone_filter),
        )
        return ProjectItemDecision.SKIP

    return ProjectItemDecision.ADD
