"""Pydantic Settings model for the GitHub Actions runner environment."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from add_to_project.utils.constants import DEFAULT_GITHUB_API_URL


class Settings(BaseSettings):
    """Environment variable settings provided by the runner."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Set to 1 when a workflow is re-run with debug logging enabled
    RUNNER_DEBUG: bool = False

    # GitHub API settings
    GITHUB_API_URL: str = DEFAULT_GITHUB_API_URL

    # Webhook event payload and step output files
    GITHUB_EVENT_PATH: Path | None = None
    GITHUB_OUTPUT: Path | None = None

    @field_validator("GITHUB_EVENT_PATH", "GITHUB_OUTPUT", mode="before")
    @classmethod
    def empty_path_is_unset(cls, value: object) -> object:
        """Treat empty path variables as unset."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


def get_settings() -> Settings:
    """Read the runner settings from the current environment."""
    return Settings()
