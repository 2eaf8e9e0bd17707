"""Pydantic schemas for the commit status endpoint.

See: https://docs.github.com/en/rest/commits/statuses
"""

from datetime import datetime
from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints


class CommitState(StrEnum):
    """States GitHub accepts for a commit status."""

    SUCCESS = "success"
    PENDING = "pending"
    FAILURE = "failure"
    ERROR = "error"


def is_commit_state(value: object) -> bool:
    """Return True when value is one of the four commit state strings."""
    return isinstance(value, str) and value in {state.value for state in CommitState}


# Path segments are trimmed; body text is sent as given
UrlPart = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CommitStatusRequest(BaseModel):
    """A request to attach a status to a commit.

    owner, repo and sha form the URL; everything else goes in the body.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    owner: UrlPart = Field(description="Repository owner (org or user)")
    repo: UrlPart = Field(description="Repository name")
    sha: UrlPart = Field(description="Commit SHA the status is attached to")
    state: CommitState = Field(description="Commit state")
    allow_forks: bool = Field(
        default=False,
        alias="allowForks",
        description="Whether the status may be set on commits from forks",
    )
    context: str | None = Field(default=None, description="Label differentiating this status")
    description: str | None = Field(default=None, description="Short human readable description")
    target_url: str | None = Field(default=None, description="URL linked from the status")

    def to_body(self) -> dict[str, Any]:
        """Build the JSON body for the status POST.

        allowForks and state always lead; optional fields are only
        included when set.
        """
        body: dict[str, Any] = {
            "allowForks": self.allow_forks,
            "state": str(self.state),
        }
        for key in ("context", "description", "target_url"):
            value = getattr(self, key)
            if value is not None:
                body[key] = value
        return body


class CommitStatus(BaseModel):
    """Commit status object returned by the API after creation.

    Every field is optional so a sparse or empty body still parses.
    """

    model_config = ConfigDict(extra="ignore")

    id: int | None = Field(default=None, description="Status ID")
    state: str | None = Field(default=None, description="Commit state")
    context: str | None = Field(default=None, description="Status context label")
    description: str | None = Field(default=None, description="Status description")
    target_url: str | None = Field(default=None, description="Linked URL")
    url: str | None = Field(default=None, description="API URL of the status")
    created_at: datetime | None = Field(default=None, description="Creation time (UTC)")
    updated_at: datetime | None = Field(default=None, description="Last update time (UTC)")
