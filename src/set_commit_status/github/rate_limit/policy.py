"""Rate limit classification and retry scheduling.

Two pure functions:
- classify_response: read status code and headers into a RateLimitSignal
- schedule_retry: decide whether a limited call may try again
"""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from .schemas import RateLimitKind, RateLimitSignal, RetryDecision, RetryState

TOO_MANY_REQUESTS = 429

HEADER_REMAINING = "x-ratelimit-remaining"
HEADER_RETRY_AFTER = "retry-after"


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_retry_after(headers: Mapping[str, str]) -> int:
    """Read Retry-After as whole seconds.

    Missing, unparsable or negative values all mean "no wait".
    """
    seconds = _parse_int(httpx.Headers(headers).get(HEADER_RETRY_AFTER))
    if seconds is None:
        return 0
    return max(0, seconds)


def classify_response(response: httpx.Response) -> RateLimitSignal:
    """Classify a response as a primary, secondary, or no rate limit.

    A 429 with ``X-RateLimit-Remaining: 0`` means the quota is spent.
    Any other 429 is treated as a secondary (abuse) limit.

    Args:
        response: Response returned by the transport

    Returns:
        RateLimitSignal for this response
    """
    if response.status_code != TOO_MANY_REQUESTS:
        return RateLimitSignal(kind=RateLimitKind.NONE)

    retry_after = parse_retry_after(response.headers)
    remaining = _parse_int(response.headers.get(HEADER_REMAINING))
    if remaining == 0:
        return RateLimitSignal(kind=RateLimitKind.PRIMARY, retry_after_seconds=retry_after)
    return RateLimitSignal(kind=RateLimitKind.SECONDARY, retry_after_seconds=retry_after)


def schedule_retry(
    state: RetryState,
    signal: RateLimitSignal,
    max_retries: int,
) -> RetryDecision:
    """Decide whether a rate limited call may be sent again.

    Args:
        state: Attempts already retried in this call
        signal: Classification of the latest response
        max_retries: Retries allowed after the first attempt

    Returns:
        RetryDecision; wait_seconds is the server's Retry-After when proceeding

    Raises:
        ValueError: If the signal does not describe a rate limit
    """
    if not signal.is_limited:
        raise ValueError("schedule_retry called for a response that is not rate limited")
    if state.attempts >= max_retries:
        return RetryDecision(proceed=False)
    return RetryDecision(proceed=True, wait_seconds=signal.retry_after_seconds)
