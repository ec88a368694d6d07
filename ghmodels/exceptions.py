"""GitHub Models client exceptions."""

from typing import Optional

import httpx


class ModelsError(Exception):
    """Base exception for the GitHub Models client."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ModelsHTTPError(ModelsError):
    """Raised when the inference endpoint answers with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(ModelsError):
    """Raised when no token can be found for the configured host."""
    pass


class StreamError(ModelsError):
    """Base exception for failures while decoding an event stream."""
    pass


class EventDecodeError(StreamError):
    """Raised when a data payload cannot be decoded into the expected type."""
    pass


class UnexpectedEventError(StreamError):
    """Raised when the stream carries a field other than ``data``."""

    def __init__(self, field: str):
        super().__init__(f"unexpected event type: {field}")
        self.field = field


class IncompleteStreamError(StreamError):
    """Raised when the stream closes without a [DONE] marker."""

    def __init__(self, message: str = "incomplete stream"):
        super().__init__(message)


def format_http_error(response: httpx.Response) -> str:
    """
    Build a human-readable message from a failed response.

    The message starts with a short phrase keyed by status code, followed
    by the raw response body on its own line when there is one. The body
    must already have been read.
    """
    if response.status_code == 401:
        message = "unauthorized"
    elif response.status_code == 400:
        message = "bad request"
    else:
        status_line = f"{response.status_code} {response.reason_phrase}".strip()
        message = f"unexpected response from the server: {status_line}"

    body = response.text
    if body:
        message += "\n" + body + "\n"

    return message
