"""Typed protocol contracts shared across runtime components."""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Protocol


class ResponseLike(Protocol):
    """Minimal HTTP response contract used by the source transport code."""

    status_code: int
    content: bytes

    def json(self) -> Any:
        """Decode the response body as JSON."""

    def raise_for_status(self) -> None:
        """Raise for non-successful HTTP responses."""


class SessionLike(Protocol):
    """Minimal HTTP session contract used by source mixins."""

    headers: MutableMapping[str, str]

    def get(
        self,
        url: str,
        params: Mapping[str, object] | None = None,
        timeout: tuple[float, float] | None = None,
    ) -> ResponseLike:
        """Perform an HTTP GET request and return a response object."""
