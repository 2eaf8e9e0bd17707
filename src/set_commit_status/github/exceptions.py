"""GitHub client exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from .rate_limit.schemas import RateLimitKind


class InvalidCommitStateError(ValueError):
    """Raised before any request when a status state is not recognized."""

    def __init__(self, state: object) -> None:
        super().__init__(
            f"Invalid commit state {state!r}, expected one of: success, pending, failure, error"
        )
        self.state = state


class GitHubClientError(Exception):
    """Base exception for GitHub client errors."""

    pass


class GitHubAuthenticationError(GitHubClientError):
    """Raised when no token is available or authentication fails (401)."""

    pass


class GitHubRequestError(GitHubClientError):
    """Raised for a non-2xx response that is not a rate limit.

    The message is the raw response body so it can be shown as-is.
    """

    def __init__(self, message: str, response: httpx.Response | None = None) -> None:
        super().__init__(message)
        self.response = response
        self.status_code = response.status_code if response is not None else None


class GitHubNotFoundError(GitHubRequestError):
    """Raised when the repository or commit is not found (404)."""

    pass


class GitHubUnauthorizedError(GitHubRequestError, GitHubAuthenticationError):
    """Raised when GitHub rejects the token (401)."""

    pass


class GitHubRateLimitError(GitHubClientError):
    """Base class for 429 responses."""

    def __init__(
        self,
        message: str,
        kind: RateLimitKind | None = None,
        retry_after: int = 0,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.retry_after = retry_after


class RateLimitExhaustedError(GitHubRateLimitError):
    """Raised when every allowed attempt was rate limited.

    The message is the raw body of the final 429 response.
    """

    def __init__(
        self,
        message: str,
        kind: RateLimitKind | None = None,
        retry_after: int = 0,
        attempts: int = 0,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message, kind=kind, retry_after=retry_after)
        self.attempts = attempts
        self.response = response
