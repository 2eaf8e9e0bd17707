"""Test fixtures for set-commit-status."""

from .github_responses import (
    PRIMARY_LIMIT_BODY,
    PRIMARY_LIMIT_HEADERS,
    PRIMARY_WARNING,
    SECONDARY_LIMIT_BODY,
    SECONDARY_LIMIT_HEADERS,
    SECONDARY_WARNING,
    SHA,
    STATUS_CREATED_BODY,
    STATUS_ROUTE,
    make_response,
    messages_at,
)

__all__ = [
    "PRIMARY_LIMIT_BODY",
    "PRIMARY_LIMIT_HEADERS",
    "PRIMARY_WARNING",
    "SECONDARY_LIMIT_BODY",
    "SECONDARY_LIMIT_HEADERS",
    "SECONDARY_WARNING",
    "SHA",
    "STATUS_CREATED_BODY",
    "STATUS_ROUTE",
    "make_response",
    "messages_at",
]
