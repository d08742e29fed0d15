"""Unit tests for reconciling action inputs into a run configuration."""

import pytest

from add_to_project.configuration.exceptions import RequiredConfigurationElementError
from add_to_project.configuration.reconcile import (
    parse_boolean_input,
    reconcile_action_configuration,
    reconcile_filter_configuration,
    split_comma_separated,
)
from add_to_project.synchronize.models import FilterConfig, LabelOperator


@pytest.mark.parametrize(
    "value, lowercase, expected",
    [
        pytest.param("bug, Urgent ,,docs", True, ("bug", "urgent", "docs"), id="labels are trimmed and lowercased"),
        pytest.param("v1.0, V2.0 ", False, ("v1.0", "V2.0"), id="milestones keep their case"),
        pytest.param("", False, (), id="empty input"),
        pytest.param(" , ", False, (), id="only separators"),
        pytest.param(None, False, (), id="missing input"),
    ],
)
def test_split_comma_separated(value: str | None, lowercase: bool, expected: tuple[str, ...]) -> None:
    """Test splitting comma-separated inputs."""
    assert split_comma_separated(value, lowercase=lowercase) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        pytest.param("true", True, id="true"),
        pytest.param("True", True, id="capitalized True"),
        pytest.param("TRUE", False, id="upper case is not true"),
        pytest.param("yes", False, id="yes is not true"),
        pytest.param("false", False, id="false"),
        pytest.param("", False, id="empty"),
        pytest.param(None, False, id="missing"),
    ],
)
def test_parse_boolean_input(value: str | None, expected: bool) -> None:
    """Test parsing boolean inputs."""
    assert parse_boolean_input(value) is expected


def test_reconcile_filter_configuration() -> None:
    """Test building filters from raw inputs."""
    filters = reconcile_filter_configuration(
        labeled="Bug, urgent",
        label_operator="AND",
        milestoned="v2, v3",
        remove_unmatched="True",
        fuzzy_match="true",
    )

    assert filters == FilterConfig(
        label_filter=("bug", "urgent"),
        label_operator=LabelOperator.AND,
        milestone_filter=("v2", "v3"),
        remove_unmatched=True,
        fuzzy_match=True,
    )


def test_reconcile_filter_configuration_defaults() -> None:
    """Test that missing inputs produce filters letting everything through."""
    assert reconcile_filter_configuration() == FilterConfig()


def test_reconcile_action_configuration() -> None:
    """Test reconciling a complete set of inputs."""
    config = reconcile_action_configuration(
        project_url=" https://github.com/orgs/acme/projects/7 ",
        github_token="token",
        labeled="bug",
        github_api_url="https://ghes.example.com/api/v3",
        debug=True,
    )

    assert config.project_url == "https://github.com/orgs/acme/projects/7"
    assert config.github_token == "token"
    assert config.filters.label_filter == ("bug",)
    assert config.filters.label_operator is LabelOperator.OR
    assert config.github_api_url == "https://ghes.example.com/api/v3"
    assert config.debug is True


def test_reconcile_action_configuration_default_api_url() -> None:
    """Test that the public GitHub API is used when no API URL is given."""
    config = reconcile_action_configuration(project_url="https://github.com/orgs/acme/projects/7", github_token="token")

    assert config.github_api_url == "https://api.github.com"


@pytest.mark.parametrize(
    "project_url, github_token, missing",
    [
        pytest.param(None, "token", "project-url", id="missing project url"),
        pytest.param("  ", "token", "project-url", id="blank project url"),
        pytest.param("https://github.com/orgs/acme/projects/7", None, "github-token", id="missing token"),
        pytest.param("https://github.com/orgs/acme/projects/7", "", "github-token", id="empty token"),
    ],
)
def test_reconcile_action_configuration_missing_required(project_url: str | None, github_token: str | None, missing: str) -> None:
    """Test that missing required inputs raise RequiredConfigurationElementError."""
    with pytest.raises(RequiredConfigurationElementError) as exc_info:
        reconcile_action_configuration(project_url=project_url, github_token=github_token)

    assert exc_info.value.name == missing
    assert "Missing required configuration element" in str(exc_info.value)
