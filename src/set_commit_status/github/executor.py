"""Rate-limit-aware request execution.

The executor sends one logical request through the transport, re-sending
it while GitHub answers 429 and the retry budget allows:

    Idle -> Sending -> Succeeded
                    -> Limited -> Waiting -> Sending
                    -> Failed

Every limited response produces exactly one warning, including the last
one before giving up. Non-429 failures are raised without retrying.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

import httpx

from set_commit_status.logging import get_logger

from .exceptions import (
    GitHubNotFoundError,
    GitHubRequestError,
    GitHubUnauthorizedError,
    RateLimitExhaustedError,
)
from .rate_limit import (
    RateLimitKind,
    RateLimitSignal,
    RetryState,
    classify_response,
    schedule_retry,
)
from .transport import RequestSpec, Route, Transport

logger = get_logger(__name__)

Sleep = Callable[[float], Awaitable[None]]

DEFAULT_MAX_RETRIES = 3


def _limit_message(signal: RateLimitSignal, route: Route) -> str:
    if signal.kind is RateLimitKind.PRIMARY:
        return f"Request quota exhausted for request {route.method} {route.template}"
    return f"SecondaryRateLimit detected for request {route.method} {route.template}"


def _request_error(response: httpx.Response) -> GitHubRequestError:
    """Convert a failed non-429 response to our custom exceptions."""
    message = response.text or f"GitHub API error ({response.status_code})"
    if response.status_code == 401:
        return GitHubUnauthorizedError(message, response)
    if response.status_code == 404:
        return GitHubNotFoundError(message, response)
    return GitHubRequestError(message, response)


class RequestExecutor:
    """Send a request, retrying on GitHub rate limits.

    The executor holds no per-call state, so one instance can serve any
    number of concurrent calls; each call gets its own RetryState.

    Usage:
        executor = RequestExecutor(transport, max_retries=3)
        response = await executor.execute(route, url, RequestSpec("POST", headers, body))
    """

    def __init__(
        self,
        transport: Transport,
        *,
        max_retries: int = DEFAULT_MAX_RETRIES,
        sleep: Sleep | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            transport: Async callable that sends a single request
            max_retries: Retries allowed after the first attempt
            sleep: Awaitable delay used between attempts (default: asyncio.sleep)
        """
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self._transport = transport
        self._max_retries = max_retries
        self._sleep = sleep or asyncio.sleep

    @property
    def max_retries(self) -> int:
        return self._max_retries

    async def execute(self, route: Route, url: str, request: RequestSpec) -> httpx.Response:
        """Send the request until it succeeds, fails, or exhausts its retries.

        Args:
            route: Templated route, used in log messages
            url: Fully expanded request URL
            request: Method, headers and body sent on every attempt

        Returns:
            The first successful (2xx) response, unchanged

        Raises:
            RateLimitExhaustedError: Every allowed attempt returned 429
            GitHubRequestError: A non-429 error response was returned
            httpx.HTTPError: The transport itself failed
        """
        state = RetryState()

        while True:
            logger.debug("Sending {} (attempt {})", route, state.attempts + 1)
            response = await self._transport(url, request)

            signal = classify_response(response)
            if not signal.is_limited:
                if response.is_success:
                    return response
                raise _request_error(response)

            decision = schedule_retry(state, signal, self._max_retries)
            logger.warning(_limit_message(signal, route))

            if not decision.proceed:
                raise RateLimitExhaustedError(
                    response.text,
                    kind=signal.kind,
                    retry_after=signal.retry_after_seconds,
                    attempts=state.attempts + 1,
                    response=response,
                )

            logger.info(f"Retrying after {decision.wait_seconds} seconds!")
            state.attempts += 1
            await self._sleep(decision.wait_seconds)
