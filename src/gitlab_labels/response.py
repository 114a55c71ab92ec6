"""Response envelope returned by every executed request."""

from __future__ import annotations

from typing import Generic, Mapping, Optional, TypeVar

import requests

from .utils import int_or_none

T = TypeVar("T")


class Response(Generic[T]):
    """Transport-level view of a GitLab response plus its decoded payload.

    The envelope is built as soon as a response arrives, so it is available
    on errors raised after that point (``HTTPStatusError.response``,
    ``DecodingError.response``) as well as on success.
    """

    def __init__(self, raw: requests.Response, data: Optional[T] = None) -> None:
        self.raw = raw
        self.data = data

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        return self.raw.headers

    @property
    def url(self) -> str:
        return self.raw.url

    @property
    def ok(self) -> bool:
        return 200 <= self.raw.status_code < 300

    # ------------------------------------------------------------------
    # Pagination (X-* headers and the Link header)
    # ------------------------------------------------------------------
    @property
    def page(self) -> Optional[int]:
        return int_or_none(self.headers.get("X-Page"))

    @property
    def per_page(self) -> Optional[int]:
        return int_or_none(self.headers.get("X-Per-Page"))

    @property
    def total(self) -> Optional[int]:
        return int_or_none(self.headers.get("X-Total"))

    @property
    def total_pages(self) -> Optional[int]:
        return int_or_none(self.headers.get("X-Total-Pages"))

    @property
    def next_page(self) -> Optional[int]:
        return int_or_none(self.headers.get("X-Next-Page"))

    @property
    def prev_page(self) -> Optional[int]:
        return int_or_none(self.headers.get("X-Prev-Page"))

    @property
    def links(self) -> dict[str, str]:
        """Map of ``rel`` to URL parsed from the ``Link`` header."""
        return {rel: link["url"] for rel, link in self.raw.links.items() if "url" in link}

    # ------------------------------------------------------------------
    # Rate limiting
    # ------------------------------------------------------------------
    @property
    def ratelimit_limit(self) -> Optional[int]:
        return int_or_none(self.headers.get("RateLimit-Limit"))

    @property
    def ratelimit_remaining(self) -> Optional[int]:
        return int_or_none(self.headers.get("RateLimit-Remaining"))

    @property
    def ratelimit_reset(self) -> Optional[int]:
        """Unix timestamp at which the rate-limit window resets."""
        return int_or_none(self.headers.get("RateLimit-Reset"))

    @property
    def retry_after(self) -> Optional[int]:
        """Seconds to wait before retrying, from ``Retry-After``."""
        return int_or_none(self.headers.get("Retry-After"))

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}] {self.url}>"
