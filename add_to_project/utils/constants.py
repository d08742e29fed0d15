"""Shared constants used across the application."""

# This file is intended to hold shared constants.

import re

# Project URL Constants
# ---------------------

PROJECT_URL_PATTERN = re.compile(
    r"^(?:https?://)?(?P<host>[^/\s]+)/(?P<owner_type>orgs|users)/(?P<owner_name>[^/\s]+)/projects/(?P<project_number>\d+)(?:[/?#].*)?$"
)
"""Pattern to match project board URLs (e.g., https://github.com/orgs/acme/projects/7)."""

PROJECT_URL_FORMAT = "https://github.com/<orgs-or-users>/<ownerName>/projects/<projectNumber>"
"""Human-readable format shown when a project URL cannot be parsed."""

# Project Item Constants
# ----------------------

PROJECT_ITEMS_PAGE_SIZE = 100
"""Number of project items requested per page when locating an item to remove."""

# Action Output Constants
# -----------------------

ITEM_ID_OUTPUT = "itemId"
"""Output name holding the ID of the project item created for the issue or pull request."""

DELETED_ITEM_ID_OUTPUT = "deletedItemId"
"""Output name holding the ID of the project item that was removed."""

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub API URL, overridden on GitHub Enterprise Server runners."""
