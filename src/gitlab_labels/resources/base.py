"""Base resource helpers."""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING, TypeVar

if TYPE_CHECKING:  # pragma: no cover
    from ..client import Decoder, GitLab
    from ..response import Response

T = TypeVar("T")


class Resource:
    """Shared helpers for resource classes."""

    def __init__(self, client: "GitLab") -> None:
        self._client = client

    @property
    def _logger(self):
        return self._client._logger

    def _request(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        *,
        decoder: Optional["Decoder[T]"] = None,
        timeout: Optional[float] = None,
    ) -> "Response[T]":
        return self._client.request(method, path, body, decoder=decoder, timeout=timeout)

    def _get(
        self,
        path: str,
        params: Optional[Any] = None,
        *,
        decoder: Optional["Decoder[T]"] = None,
        timeout: Optional[float] = None,
    ) -> "Response[T]":
        return self._request("GET", path, params, decoder=decoder, timeout=timeout)

    def _post(
        self,
        path: str,
        body: Optional[Any] = None,
        *,
        decoder: Optional["Decoder[T]"] = None,
        timeout: Optional[float] = None,
    ) -> "Response[T]":
        return self._request("POST", path, body, decoder=decoder, timeout=timeout)

    def _put(
        self,
        path: str,
        body: Optional[Any] = None,
        *,
        decoder: Optional["Decoder[T]"] = None,
        timeout: Optional[float] = None,
    ) -> "Response[T]":
        return self._request("PUT", path, body, decoder=decoder, timeout=timeout)

    def _delete(
        self,
        path: str,
        params: Optional[Any] = None,
        *,
        decoder: Optional["Decoder[T]"] = None,
        timeout: Optional[float] = None,
    ) -> "Response[T]":
        return self._request("DELETE", path, params, decoder=decoder, timeout=timeout)
