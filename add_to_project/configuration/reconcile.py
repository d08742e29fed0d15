"""Reconcile raw action inputs into the configuration of a run."""

from add_to_project.configuration.exceptions import RequiredConfigurationElementError
from add_to_project.configuration.models import ActionConfig
from add_to_project.synchronize.models import FilterConfig, LabelOperator
from add_to_project.utils.constants import DEFAULT_GITHUB_API_URL


def split_comma_separated(value: str | None, lowercase: bool = False) -> tuple[str, ...]:
    """Split a comma-separated input into trimmed, non-empty entries."""
    entries = (entry.strip() for entry in (value or "").split(","))
    return tuple(entry.lower() if lowercase else entry for entry in entries if entry)


def parse_boolean_input(value: str | None) -> bool:
    """Parse a boolean action input; only 'true' and 'True' are true."""
    return value in ("true", "True")


def reconcile_filter_configuration(
    labeled: str | None = None,
    label_operator: str | None = None,
    milestoned: str | None = None,
    remove_unmatched: str | None = None,
    fuzzy_match: str | None = None,
) -> FilterConfig:
    """Build the filter configuration from raw action inputs.

    Labels are compared case-insensitively, so they are lowercased here.
    Milestones keep their case.
    """
    return FilterConfig(
        label_filter=split_comma_separated(labeled, lowercase=True),
        label_operator=LabelOperator.from_input(label_operator),
        milestone_filter=split_comma_separated(milestoned),
        remove_unmatched=parse_boolean_input(remove_unmatched),
        fuzzy_match=parse_boolean_input(fuzzy_match),
    )


def reconcile_action_configuration(
    project_url: str | None,
    github_token: str | None,
    labeled: str | None = None,
    label_operator: str | None = None,
    milestoned: str | None = None,
    remove_unmatched: str | None = None,
    fuzzy_match: str | None = None,
    github_api_url: str | None = None,
    debug: bool = False,
) -> ActionConfig:
    """Reconcile action inputs into an ActionConfig.

    Raises:
        RequiredConfigurationElementError: If the project URL or the GitHub token is missing.
    """
    if not project_url or not project_url.strip():
        raise RequiredConfigurationElementError(name="project-url", cli_name="--project-url", env_name="INPUT_PROJECT_URL")
    if not github_token:
        raise RequiredConfigurationElementError(name="github-token", cli_name="--github-token", env_name="INPUT_GITHUB_TOKEN")

    return ActionConfig(
        project_url=project_url.strip(),
        github_token=github_token,
        filters=reconcile_filter_configuration(
            labeled=labeled,
            label_operator=label_operator,
            milestoned=milestoned,
            remove_unmatched=remove_unmatched,
            fuzzy_match=fuzzy_match,
        ),
        github_api_url=github_api_url or DEFAULT_GITHUB_API_URL,
        debug=debug,
    )
