"""Exception hierarchy raised by the GitLab client."""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .response import Response


class GitLabError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str, *, response: Optional["Response[Any]"] = None) -> None:
        super().__init__(message)
        self.message = message
        self.response = response


class ValidationError(GitLabError, ValueError):
    """Locally detectable bad input; raised before any network call."""


class ConfigurationError(GitLabError):
    """The client configuration cannot produce a request (e.g. missing base URL)."""


class EncodingError(GitLabError):
    """A request body could not be serialized into the wire format."""


class TransportError(GitLabError):
    """The request never produced a response (DNS, connect, timeout, reset)."""


class HTTPStatusError(GitLabError):
    """The server answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        response: Optional["Response[Any]"] = None,
    ) -> None:
        super().__init__(f"{status_code}: {message}", response=response)
        self.status_code = status_code
        self.error_message = message


class RateLimitError(HTTPStatusError):
    """The server answered 429 Too Many Requests."""

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        retry_after: Optional[int] = None,
        response: Optional["Response[Any]"] = None,
    ) -> None:
        super().__init__(status_code, message, response=response)
        self.retry_after = retry_after


class DecodingError(GitLabError):
    """A successful response body could not be decoded into the expected shape."""


__all__ = [
    "ConfigurationError",
    "DecodingError",
    "EncodingError",
    "GitLabError",
    "HTTPStatusError",
    "RateLimitError",
    "TransportError",
    "ValidationError",
]
