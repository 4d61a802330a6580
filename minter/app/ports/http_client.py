"""HTTP client port: contract for posting JSON to upstream APIs.

Infrastructure (e.g. httpx) implements it; store and relayer adapters depend
only on this port.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


class HttpClientError(Exception):
    """Base for HTTP client failures (status, network, etc.)."""


class HttpClientTimeoutError(HttpClientError):
    """Raised when the request times out."""


@dataclass(frozen=True)
class RequestTimeout:
    """Connect and read timeouts in seconds. None waits indefinitely."""

    connect_seconds: float | None = None
    read_seconds: float | None = None


@runtime_checkable
class AbstractHttpClient(Protocol):
    """Port: perform JSON POST requests. Implementations live in infrastructure."""

    async def post_json(
        self,
        url: str,
        payload: Any,
        *,
        timeout: RequestTimeout,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST payload as JSON and return the decoded JSON reply.

        Raise HttpClientTimeoutError or HttpClientError on failure, including non-2xx replies.
        """
        ...

    async def close(self) -> None:
        """Release resources (e.g. connection pool). No-op allowed if nothing to close."""
        ...
