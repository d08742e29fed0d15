"""Contains unit tests for building the event context from webhook payloads."""

import json
from pathlib import Path
from typing import Any

import pytest

from add_to_project.configuration.exceptions import EventPayloadError
from add_to_project.github.event import build_event_context, load_event_payload


def issue_payload(**overrides: Any) -> dict[str, Any]:
    """Build an issues event payload."""
    issue: dict[str, Any] = {
        "number": 42,
        "node_id": "I_kwDOissue42",
        "labels": [{"name": "Bug"}, {"name": "urgent"}],
        "milestone": {"title": "v2.0"},
    }
    issue.update(overrides)
    return {"action": "labeled", "issue": issue, "repository": {"owner": {"login": "acme"}}}


def test_build_event_context_from_issue() -> None:
    """Test that an issue payload is turned into an event context with lowercased labels."""
    event = build_event_context(issue_payload())

    assert event.node_id == "I_kwDOissue42"
    assert event.item_number == 42
    assert event.labels == frozenset({"bug", "urgent"})
    assert event.milestone_title == "v2.0"
    assert event.repository_owner_login == "acme"
    assert event.item_kind == "issue"


def test_build_event_context_from_pull_request() -> None:
    """Test that a pull request payload is used when there is no issue."""
    payload = {
        "action": "opened",
        "pull_request": {"number": 7, "node_id": "PR_kwDOpr7", "labels": [], "milestone": None},
        "repository": {"owner": {"login": "acme"}},
    }

    event = build_event_context(payload)

    assert event.node_id == "PR_kwDOpr7"
    assert event.item_kind == "pull_request"
    assert event.labels == frozenset()
    assert event.milestone_title is None


def test_build_event_context_prefers_issue() -> None:
    """Test that the issue wins when both an issue and a pull request are present."""
    payload = issue_payload()
    payload["pull_request"] = {"number": 7, "node_id": "PR_kwDOpr7"}

    assert build_event_context(payload).node_id == "I_kwDOissue42"


def test_build_event_context_without_milestone_or_labels() -> None:
    """Test that absent labels and milestone are modeled as empty and None."""
    event = build_event_context(issue_payload(labels=None, milestone=None))

    assert event.labels == frozenset()
    assert event.milestone_title is None


def test_build_event_context_skips_null_labels() -> None:
    """Test that null and nameless label entries are ignored."""
    event = build_event_context(issue_payload(labels=[None, {"name": "Bug"}, {}]))

    assert event.labels == frozenset({"bug"})


def test_build_event_context_without_repository() -> None:
    """Test that a payload without a repository still builds an event context."""
    payload = issue_payload()
    del payload["repository"]

    assert build_event_context(payload).repository_owner_login is None


@pytest.mark.parametrize(
    "payload",
    [
        pytest.param({"action": "push"}, id="no issue or pull request"),
        pytest.param({"issue": None, "pull_request": None}, id="null issue and pull request"),
        pytest.param({"issue": {"number": 1, "labels": []}}, id="issue without node id"),
    ],
)
def test_build_event_context_invalid(payload: dict[str, Any]) -> None:
    """Test that payloads without a usable item raise EventPayloadError."""
    with pytest.raises(EventPayloadError):
        build_event_context(payload)


def test_load_event_payload(tmp_path: Path) -> None:
    """Test loading a payload from disk."""
    event_path = tmp_path / "event.json"
    event_path.write_text(json.dumps(issue_payload()))

    assert load_event_payload(event_path)["issue"]["number"] == 42


def test_load_event_payload_missing_file(tmp_path: Path) -> None:
    """Test that a missing payload file raises EventPayloadError."""
    with pytest.raises(EventPayloadError, match="not found"):
        load_event_payload(tmp_path / "missing.json")


def test_load_event_payload_not_utf8(tmp_path: Path) -> None:
    """Test that a payload file with invalid UTF-8 raises EventPayloadError."""
    event_path = tmp_path / "event.json"
    event_path.write_bytes(b"\xff\xfe{}")

    with pytest.raises(EventPayloadError):
        load_event_payload(event_path)


@pytest.mark.parametrize(
    "content",
    [
        pytest.param("{not json", id="malformed json"),
        pytest.param("[1, 2, 3]", id="not an object"),
    ],
)
def test_load_event_payload_invalid_content(tmp_path: Path, content: str) -> None:
    """Test that unusable payload files raise EventPayloadError."""
    event_path = tmp_path / "event.json"
    event_path.write_text(content)

    with pytest.raises(EventPayloadError):
        load_event_payload(event_path)
