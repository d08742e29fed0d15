"""Contains results of application execution."""

from add_to_project.synchronize.models import ProjectItemDecision


class AddToProjectResult:
    """Contains results of the add-to-project workflow."""

    def __init__(self, decision: ProjectItemDecision, item_id: str | None = None, deleted_item_id: str | None = None) -> None:
        """Initialize the result with the decision and the ID of the item added or removed, if any."""
        self.decision = decision
        self.item_id = item_id
        self.deleted_item_id = deleted_item_id

    def __repr__(self) -> str:
        return f"AddToProjectResult(decision={self.decision}, item_id={self.item_id!r}, deleted_item_id={self.deleted_item_id!r})"
