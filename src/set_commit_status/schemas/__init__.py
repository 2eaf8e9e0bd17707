"""Pydantic schemas for commit status requests and responses."""

from .commit_status import CommitState, CommitStatus, CommitStatusRequest, is_commit_state
from .repository import parse_repo_string

__all__ = [
    "CommitState",
    "CommitStatus",
    "CommitStatusRequest",
    "is_commit_state",
    "parse_repo_string",
]
