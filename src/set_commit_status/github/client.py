"""Async client for setting GitHub commit statuses.

This module provides the public entry point of the package: a client
that posts commit statuses and transparently waits out GitHub's primary
and secondary rate limits.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from set_commit_status import __version__
from set_commit_status.config import DEFAULT_API_URL
from set_commit_status.logging import bind_commit
from set_commit_status.schemas import CommitStatus, CommitStatusRequest, is_commit_state

from .exceptions import GitHubAuthenticationError, GitHubClientError, InvalidCommitStateError
from .executor import DEFAULT_MAX_RETRIES, RequestExecutor, Sleep
from .transport import CREATE_COMMIT_STATUS, HttpxTransport, RequestSpec, Transport

ACCEPT = "application/vnd.github.v3+json"
CONTENT_TYPE = "application/json; charset=utf-8"
USER_AGENT = f"set-commit-status/{__version__}"


class ClientConfig(BaseModel):
    """Immutable configuration for a CommitStatusClient."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(min_length=1, description="GitHub token")
    max_retries: int = Field(
        default=DEFAULT_MAX_RETRIES,
        ge=0,
        description="Retries after the first attempt when rate limited",
    )
    base_url: str = Field(default=DEFAULT_API_URL, description="GitHub REST API base URL")
    timeout: float = Field(default=30.0, gt=0, description="Per-request timeout in seconds")
    user_agent: str = Field(default=USER_AGENT, description="User-Agent header value")


class CommitStatusClient:
    """Client for the GitHub commit status endpoint.

    Usage:
        async with setup_client(token) as client:
            await client.set_commit_status(
                CommitStatusRequest(owner="octo", repo="hello", sha="abc123", state="success")
            )
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Transport | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Token, retry budget and API location
            transport: Async callable sending one request. When omitted an
                       HttpxTransport is created and closed with the client.
            sleep: Awaitable delay between rate limited attempts
        """
        self._config = config
        self._closed = False
        self._owned_transport: HttpxTransport | None = None
        if transport is None:
            self._owned_transport = HttpxTransport(timeout=config.timeout)
            transport = self._owned_transport
        self._executor = RequestExecutor(
            transport,
            max_retries=config.max_retries,
            sleep=sleep,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _headers(self) -> dict[str, str]:
        return {
            "accept": ACCEPT,
            "authorization": f"token {self._config.token}",
            "content-type": CONTENT_TYPE,
            "user-agent": self._config.user_agent,
        }

    async def set_commit_status(self, request: CommitStatusRequest) -> CommitStatus:
        """Create a status on a commit.

        Args:
            request: Target commit and the status to attach

        Returns:
            CommitStatus parsed from the response (fields may be empty)

        Raises:
            InvalidCommitStateError: If the state is not a valid commit state
            RateLimitExhaustedError: If every allowed attempt was rate limited
            GitHubRequestError: If GitHub rejected the request
            GitHubClientError: If the client has been closed
        """
        if self._closed:
            raise GitHubClientError("client is closed")
        if not is_commit_state(request.state):
            raise InvalidCommitStateError(request.state)

        log = bind_commit(request.owner, request.repo, request.sha)
        url = self._config.base_url.rstrip("/") + CREATE_COMMIT_STATUS.expand(
            owner=request.owner,
            repo=request.repo,
            sha=request.sha,
        )
        body = json.dumps(request.to_body(), separators=(",", ":"))

        response = await self._executor.execute(
            CREATE_COMMIT_STATUS,
            url,
            RequestSpec(method=CREATE_COMMIT_STATUS.method, headers=self._headers(), body=body),
        )
        log.debug("Commit status set to {}", request.state)
        return _parse_status(response.content)

    async def close(self) -> None:
        """Close the transport if this client created it.

        The client cannot send requests afterwards.
        """
        self._closed = True
        if self._owned_transport is not None:
            await self._owned_transport.aclose()
            self._owned_transport = None

    async def __aenter__(self) -> CommitStatusClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.close()


def _parse_status(content: bytes) -> CommitStatus:
    if not content:
        return CommitStatus()
    try:
        data: Any = json.loads(content)
        if isinstance(data, dict):
            return CommitStatus.model_validate(data)
    except (ValueError, ValidationError):
        # Status was created; a body we can't read doesn't change that
        pass
    return CommitStatus()


def setup_client(
    token: str,
    *,
    max_retries: int = DEFAULT_MAX_RETRIES,
    base_url: str = DEFAULT_API_URL,
    timeout: float = 30.0,
    transport: Transport | None = None,
    sleep: Sleep | None = None,
) -> CommitStatusClient:
    """Create a CommitStatusClient owned by the caller.

    Each call returns a new client; nothing is shared between clients.

    Args:
        token: GitHub token
        max_retries: Retries after the first attempt (default 3, i.e. 4 attempts)
        base_url: GitHub REST API base URL
        timeout: Per-request timeout for the default transport
        transport: Optional custom transport
        sleep: Optional awaitable delay used between attempts

    Raises:
        GitHubAuthenticationError: If the token is empty
    """
    if not token:
        raise GitHubAuthenticationError(
            "GitHub token required. Pass --token or set GITHUB_TOKEN."
        )
    config = ClientConfig(
        token=token,
        max_retries=max_retries,
        base_url=base_url,
        timeout=timeout,
    )
    return CommitStatusClient(config, transport=transport, sleep=sleep)
