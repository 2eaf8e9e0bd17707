"""GitHub API client module.

This module provides:
- CommitStatusClient / setup_client: Async commit status client
- RequestExecutor: Rate-limit-aware request execution
- Rate limit classification: RateLimitKind, RateLimitSignal, etc.
- Transport: HttpxTransport, RequestSpec, Route
"""

from .client import ClientConfig, CommitStatusClient, setup_client
from .exceptions import (
    GitHubAuthenticationError,
    GitHubClientError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubRequestError,
    GitHubUnauthorizedError,
    InvalidCommitStateError,
    RateLimitExhaustedError,
)
from .executor import RequestExecutor
from .rate_limit import (
    RateLimitKind,
    RateLimitSignal,
    RetryDecision,
    RetryState,
    classify_response,
    schedule_retry,
)
from .transport import CREATE_COMMIT_STATUS, HttpxTransport, RequestSpec, Route, Transport

__all__ = [
    # Client
    "ClientConfig",
    "CommitStatusClient",
    "setup_client",
    # Exceptions
    "GitHubAuthenticationError",
    "GitHubClientError",
    "GitHubNotFoundError",
    "GitHubRateLimitError",
    "GitHubRequestError",
    "GitHubUnauthorizedError",
    "InvalidCommitStateError",
    "RateLimitExhaustedError",
    # Execution
    "RequestExecutor",
    # Rate limits
    "RateLimitKind",
    "RateLimitSignal",
    "RetryDecision",
    "RetryState",
    "classify_response",
    "schedule_retry",
    # Transport
    "CREATE_COMMIT_STATUS",
    "HttpxTransport",
    "RequestSpec",
    "Route",
    "Transport",
]
