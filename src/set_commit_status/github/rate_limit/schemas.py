"""Schemas for rate limit classification and retry decisions.

These types are derived from a single response and live only for the
duration of one logical call:
- RateLimitSignal: what a response says about limiting
- RetryState: attempts made so far within one call
- RetryDecision: whether to send again, and after how long
"""

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class RateLimitKind(StrEnum):
    """Kinds of GitHub rate limiting.

    See: https://docs.github.com/en/rest/using-the-rest-api/rate-limits-for-the-rest-api
    """

    PRIMARY = "primary"  # Hourly quota exhausted
    SECONDARY = "secondary"  # Burst/abuse detection
    NONE = "none"


class RateLimitSignal(BaseModel):
    """Rate limit information read from one response."""

    model_config = ConfigDict(frozen=True)

    kind: RateLimitKind = Field(description="Which limit, if any, the response signals")
    retry_after_seconds: int = Field(
        default=0,
        ge=0,
        description="Seconds the server asked us to wait (0 = retry immediately)",
    )

    @property
    def is_limited(self) -> bool:
        """True for primary and secondary limits."""
        return self.kind is not RateLimitKind.NONE


@dataclass
class RetryState:
    """Attempts made so far within one logical call."""

    attempts: int = 0


@dataclass(frozen=True)
class RetryDecision:
    """Outcome of consulting the retry policy."""

    proceed: bool
    wait_seconds: int = 0
