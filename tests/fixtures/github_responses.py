"""Mock GitHub commit status API responses.

Bodies and headers mirror what api.github.com returns for a created
status and for the two kinds of rate limiting.

See: https://docs.github.com/en/rest/using-the-rest-api/rate-limits-for-the-rest-api
"""

import json
from typing import Any

import httpx

# -----------------------------------------------------------------------------
# Successful status creation (POST /repos/{owner}/{repo}/statuses/{sha})
# -----------------------------------------------------------------------------
STATUS_CREATED_BODY: dict[str, Any] = {
    "url": "https://api.github.com/repos/octo/hello-world/statuses/6dcb09b5b57875f334f61aebed695e2e4193db5e",
    "id": 1,
    "node_id": "MDY6U3RhdHVzMQ==",
    "state": "success",
    "description": "Build has completed successfully",
    "target_url": "https://ci.example.com/1000/output",
    "context": "continuous-integration/jenkins",
    "created_at": "2024-01-15T10:00:00Z",
    "updated_at": "2024-01-15T10:00:00Z",
}

# -----------------------------------------------------------------------------
# Primary rate limit: quota spent, remaining is 0
# -----------------------------------------------------------------------------
PRIMARY_LIMIT_HEADERS = {
    "Retry-After": "60",
    "X-RateLimit-Limit": "60",
    "X-RateLimit-Remaining": "0",
    "X-RateLimit-Reset": "1714138800",
}

PRIMARY_LIMIT_BODY = {
    "documentation_url": "https://docs.github.com/rest/overview/resources-in-the-rest-api#rate-limiting",
    "message": "API rate limit exceeded for xxx.xxx.xxx.xxx.",
}

# -----------------------------------------------------------------------------
# Secondary rate limit: quota left, but blocked for bursting
# -----------------------------------------------------------------------------
SECONDARY_LIMIT_HEADERS = {
    "Retry-After": "1",
    "X-RateLimit-Limit": "5000",
    "X-RateLimit-Remaining": "4987",
    "X-RateLimit-Reset": "1714138800",
}

SECONDARY_LIMIT_BODY = {
    "documentation_url": "https://docs.github.com/rest/overview/resources-in-the-rest-api#secondary-rate-limits",
    "message": (
        "You have exceeded a secondary rate limit and have been temporarily "
        "blocked from content creation. Please retry your request again later."
    ),
}


def make_response(
    status_code: int = 201,
    body: Any = None,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Build an httpx.Response with a JSON body serialized by json.dumps."""
    content = b"" if body is None else json.dumps(body).encode()
    return httpx.Response(status_code, headers=headers or {}, content=content)


# -----------------------------------------------------------------------------
# Shared constants and helpers
# -----------------------------------------------------------------------------
SHA = "6dcb09b5b57875f334f61aebed695e2e4193db5e"

# Templated route that appears in every rate limit warning
STATUS_ROUTE = "POST /repos/{owner}/{repo}/statuses/{sha}"

PRIMARY_WARNING = f"Request quota exhausted for request {STATUS_ROUTE}"
SECONDARY_WARNING = f"SecondaryRateLimit detected for request {STATUS_ROUTE}"


def messages_at(records: list[tuple[str, str]], level: str) -> list[str]:
    """Messages captured by the log_records fixture at one level, in order."""
    return [message for lvl, message in records if lvl == level]
