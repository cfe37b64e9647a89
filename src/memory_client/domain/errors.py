"""Errors raised by memory server operations."""

from typing import Optional


class MemoryClientError(Exception):
    """Base class for memory client errors."""


class RequestFailed(MemoryClientError):
    """The request could not be sent or the server answered with a non-2xx status."""

    def __init__(
        self,
        action: str,
        status_code: Optional[int] = None,
        body: str = "",
        reason: Optional[str] = None,
    ):
        self.action = action
        self.status_code = status_code
        self.body = body
        if body:
            message = f"{action}: {body}"
        elif status_code is not None:
            message = f"{action}: HTTP {status_code} with empty response body"
        elif reason:
            message = f"{action}: {reason}"
        else:
            message = action
        super().__init__(message)


class DecodeFailed(MemoryClientError):
    """A successful response did not match the expected shape."""

    def __init__(self, action: str, body: str = ""):
        self.action = action
        self.body = body
        super().__init__(f"{action}: response did not match expected shape")
