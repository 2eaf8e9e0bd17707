"""HTTP transport for the GitHub REST API.

A transport is any async callable ``(url, request) -> httpx.Response``.
It sends exactly one request and never retries; retrying is the
executor's job. HttpxTransport is the default implementation.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TypeAlias
from urllib.parse import quote

import httpx


@dataclass(frozen=True)
class RequestSpec:
    """Everything a transport needs besides the URL."""

    method: str
    headers: dict[str, str] = field(default_factory=dict)
    body: str | None = None


Transport: TypeAlias = Callable[[str, RequestSpec], Awaitable[httpx.Response]]


@dataclass(frozen=True)
class Route:
    """An API route kept in its templated form.

    The template (not the expanded URL) is what appears in log lines so
    that messages group by endpoint shape.
    """

    method: str
    template: str

    def expand(self, **params: str) -> str:
        """Fill the template with URL-quoted path parameters."""
        return self.template.format(**{k: quote(str(v), safe="") for k, v in params.items()})

    def __str__(self) -> str:
        return f"{self.method} {self.template}"


CREATE_COMMIT_STATUS = Route("POST", "/repos/{owner}/{repo}/statuses/{sha}")


class HttpxTransport:
    """Transport backed by a shared httpx.AsyncClient.

    Usage:
        async with HttpxTransport(timeout=30.0) as transport:
            response = await transport(url, RequestSpec("POST", headers, body))
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the transport.

        Args:
            client: Existing AsyncClient to send through. When omitted the
                    transport creates (and later closes) its own.
            timeout: Per-request timeout for a client created here
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def __call__(self, url: str, request: RequestSpec) -> httpx.Response:
        return await self._client.request(
            request.method,
            url,
            headers=request.headers,
            content=request.body,
        )

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.aclose()
