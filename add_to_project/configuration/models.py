"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass, field

from add_to_project.synchronize.models import FilterConfig
from add_to_project.utils.constants import DEFAULT_GITHUB_API_URL


@dataclass
class ActionConfig:
    """Configuration class for a single add-to-project run."""

    project_url: str
    github_token: str
    filters: FilterConfig = field(default_factory=FilterConfig)
    github_api_url: str = DEFAULT_GITHUB_API_URL
    debug: bool = False
