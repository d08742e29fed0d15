"""Contains exceptions raised when reconciling application configuration."""


class ConfigurationError(Exception):
    """Base class for fatal configuration errors."""

    pass


class InvalidUrlError(ConfigurationError):
    """Raised when a project URL does not match the expected format."""

    def __init__(self, url: str, expected_format: str) -> None:
        """Initializes the exception with the offending URL."""
        super().__init__(f"Invalid project URL: {url}. Project URL should match the format {expected_format}")
        self.url = url


class UnsupportedOwnerKindError(ConfigurationError):
    """Raised when a project owner type is neither an organization nor a user."""

    def __init__(self, owner_type: str | None) -> None:
        """Initializes the exception with the unsupported owner type."""
        super().__init__(f"Unsupported ownerType: {owner_type}. Must be one of 'orgs' or 'users'")
        self.owner_type = owner_type


class ProjectNotFoundError(ConfigurationError):
    """Raised when the configured project cannot be found for its owner."""

    def __init__(self, owner_name: str, project_number: int) -> None:
        """Initializes the exception with the project coordinates."""
        super().__init__(f"Project {project_number} not found for owner {owner_name}. Check the project URL and the token's access.")
        self.owner_name = owner_name
        self.project_number = project_number


class EventPayloadError(ConfigurationError):
    """Raised when the webhook event payload has no usable issue or pull request."""

    pass


class RequiredConfigurationElementError(ConfigurationError):
    """Raised when a required configuration element is missing."""

    def __init__(self, name: str, cli_name: str, env_name: str) -> None:
        """Initializes the exception with the name of the missing element."""
        super().__init__(f"Missing required configuration element: {name} (command line option {cli_name}, environment variable {env_name})")
        self.name = name
        self.cli_name = cli_name
        self.env_name = env_name
