"""Utility modules for shared functionality."""

from .constants import (
    DELETED_ITEM_ID_OUTPUT,
    ITEM_ID_OUTPUT,
    PROJECT_ITEMS_PAGE_SIZE,
    PROJECT_URL_PATTERN,
)
from .github import OwnerKind, ProjectRef, parse_project_url, resolve_owner_kind_query_root

__all__ = [
    "PROJECT_URL_PATTERN",
    "PROJECT_ITEMS_PAGE_SIZE",
    "ITEM_ID_OUTPUT",
    "DELETED_ITEM_ID_OUTPUT",
    "OwnerKind",
    "ProjectRef",
    "parse_project_url",
    "resolve_owner_kind_query_root",
]
