"""Exceptions raised by the EOL invasive-species client."""

from __future__ import annotations


class EolError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgument(EolError, ValueError):
    """Raised before any network call when caller input is unusable."""


class RemoteRequestFailed(EolError):
    """Raised when a collection page cannot be retrieved or decoded.

    Attributes:
        status: HTTP status code, or ``None`` when no usable response arrived.
        page: Page number that failed (1 for the first request).
    """

    def __init__(self, status: int | None, page: int, reason: str = "") -> None:
        self.status = status
        self.page = page
        self.reason = reason
        detail = f"HTTP {status}" if status is not None else "no response"
        message = f"EOL request for page {page} failed ({detail})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
