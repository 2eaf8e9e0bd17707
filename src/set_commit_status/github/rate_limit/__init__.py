"""Rate limit handling for the GitHub API.

Classifies 429 responses into primary and secondary limits and decides
whether a limited request may be retried.
"""

from .policy import classify_response, parse_retry_after, schedule_retry
from .schemas import RateLimitKind, RateLimitSignal, RetryDecision, RetryState

__all__ = [
    "RateLimitKind",
    "RateLimitSignal",
    "RetryDecision",
    "RetryState",
    "classify_response",
    "parse_retry_after",
    "schedule_retry",
]
