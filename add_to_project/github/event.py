"""Builds the event context from a GitHub webhook event payload."""

import json
from pathlib import Path
from typing import Any

import structlog

from add_to_project.configuration.exceptions import EventPayloadError
from add_to_project.synchronize.models import EventContext

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def load_event_payload(event_path: Path) -> dict[str, Any]:
    """Load the webhook event payload the runner wrote to disk."""
    try:
        with open(event_path, encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as exc:
        raise EventPayloadError(f"Event payload file not found: {event_path}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise EventPayloadError(f"Event payload file is not valid JSON: {event_path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise EventPayloadError(f"Event payload must be a JSON object: {event_path}")
    return payload


def build_event_context(payload: dict[str, Any]) -> EventContext:
    """Extract the issue or pull request the event was delivered for.

    Issues take precedence over pull requests, matching the payloads of
    events such as issue_comment on a pull request.
    """
    if payload.get("issue"):
        item, item_kind = payload["issue"], "issue"
    elif payload.get("pull_request"):
        item, item_kind = payload["pull_request"], "pull_request"
    else:
        raise EventPayloadError("Event payload contains neither an issue nor a pull request.")

    node_id = item.get("node_id")
    if not node_id:
        raise EventPayloadError(f"The {item_kind.replace('_', ' ')} in the event payload has no node_id.")

    labels = frozenset(label["name"].lower() for label in item.get("labels") or [] if label and label.get("name"))
    milestone = item.get("milestone") or {}
    owner = (payload.get("repository") or {}).get("owner") or {}

    event = EventContext(
        node_id=node_id,
        item_number=item.get("number"),
        labels=labels,
        milestone_title=milestone.get("title"),
        repository_owner_login=owner.get("login"),
        item_kind=item_kind,  # type: ignore[arg-type]
    )
    logger.debug(
        "Loaded event context",
        item_kind=event.item_kind,
        item_number=event.item_number,
        content_id=event.node_id,
        owner=event.repository_owner_login,
    )
    return event
