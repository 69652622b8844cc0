"""Domain-specific exceptions raised by mplus_source runtime components."""

from __future__ import annotations


class SourceError(Exception):
    """Base exception for mplus_source-specific runtime failures."""


class FetchError(SourceError):
    """Raised when the HTTP transport fails or returns a non-success status."""


class DecodeError(SourceError):
    """Raised when a payload has an unexpected shape or cannot be decoded."""


class ApiError(SourceError):
    """Raised when MANGA Plus API returns an error or non-success envelope."""

    def __init__(self, message: str, *, subject: str = "", body: str = "") -> None:
        super().__init__(message)
        self.subject = subject
        self.body = body


class NotFoundError(ApiError):
    """Raised when the API does not recognize a series or chapter id."""
