"""Contains exceptions raised when talking to the GitHub API."""


class RemoteCallError(Exception):
    """Raised when a GitHub API query or mutation fails."""

    def __init__(self, operation: str, message: str) -> None:
        """Initializes the exception with the failed operation and its error details."""
        super().__init__(f"GitHub API call {operation} failed: {message}")
        self.operation = operation
