"""Core GitLab client: request construction and execution."""

from __future__ import annotations

import json as jsonlib
import logging
from dataclasses import replace
from typing import Any, Callable, Mapping, Optional, TypeVar
from urllib.parse import urljoin

import requests

from .config import AuthMethod, ClientConfig
from .errors import (
    DecodingError,
    EncodingError,
    HTTPStatusError,
    RateLimitError,
    TransportError,
)
from .resources.labels import Labels
from .response import Response
from .utils import drop_none

T = TypeVar("T")
Decoder = Callable[[Any], T]

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})
_QUERY_SCALARS = (str, int, float)


class GitLab:
    """Resource-grouped client for the GitLab REST API."""

    labels: Labels

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        auth_method: Optional[AuthMethod] = None,
        default_timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Create a GitLab client bound to an API root.

        Parameters
        ----------
        config
            Complete configuration. When omitted it is read from the
            ``GITLAB_*`` environment variables.
        base_url, token, auth_method, default_timeout
            Override the matching ``config`` fields.
        session
            Optional requests session to reuse connections. A session the
            client creates itself is closed by :meth:`close`.
        """
        overrides = drop_none(
            {
                "base_url": base_url,
                "token": token,
                "auth_method": auth_method,
                "default_timeout": default_timeout,
            }
        )
        if config is None:
            config = ClientConfig.from_env(**overrides)
        elif overrides:
            config = replace(config, **overrides)
        self.config = config
        self._logger = logging.getLogger(__name__)
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

        self.labels: Labels = Labels(self)

    def __enter__(self) -> "GitLab":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    # ------------------------------------------------------------------
    # Request executor
    # ------------------------------------------------------------------
    def new_request(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
    ) -> requests.PreparedRequest:
        """Build a request against the configured API root.

        Parameters
        ----------
        method
            HTTP method. GET, DELETE and HEAD send ``body`` as a query string;
            POST, PUT and PATCH send it as a JSON payload.
        path
            Endpoint path relative to the API root, e.g. ``projects/42/labels``.
        body
            Options bag (anything with ``to_params()``) or mapping. Keys whose
            value is ``None`` are not sent.

        Returns
        -------
        requests.PreparedRequest
            Request ready for :meth:`do`.

        Raises
        ------
        ConfigurationError
            If the base URL is unset or invalid.
        EncodingError
            If ``body`` cannot be serialized.
        """
        method = method.upper()
        url = urljoin(self.config.api_root(), path.lstrip("/"))
        headers = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }
        headers.update(self.config.auth_headers())

        params = _body_params(body)
        data: Optional[str] = None
        query: Optional[list[tuple[str, str]]] = None
        if params and method in BODY_METHODS:
            try:
                data = jsonlib.dumps(params, allow_nan=False)
            except (TypeError, ValueError) as exc:
                raise EncodingError(f"Cannot encode {method} body for {path}: {exc}") from exc
            headers["Content-Type"] = "application/json"
        elif params:
            query = _query_params(params)

        request = requests.Request(method, url, headers=headers, params=query, data=data)
        try:
            return request.prepare()
        except (requests.RequestException, ValueError) as exc:
            raise EncodingError(f"Cannot build {method} request for {path}: {exc}") from exc

    def do(
        self,
        request: requests.PreparedRequest,
        decoder: Optional[Decoder[T]] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Response[T]:
        """Execute ``request`` once and decode its body with ``decoder``.

        Parameters
        ----------
        request
            Request built by :meth:`new_request`.
        decoder
            Callable turning the parsed JSON body into the result type. When
            ``None`` the body is not decoded.
        timeout
            Timeout in seconds for this call; defaults to the config's.

        Returns
        -------
        Response
            Envelope with status, headers, pagination and ``data``.

        Raises
        ------
        TransportError
            If no response was received.
        HTTPStatusError
            If the status is not 2xx (``RateLimitError`` for 429).
        DecodingError
            If a 2xx body is empty, not JSON, or not the expected shape.
        """
        if timeout is None:
            timeout = self.config.default_timeout
        self._logger.debug("%s %s", request.method, request.url)
        try:
            raw = self._session.send(request, timeout=timeout)
        except requests.RequestException as exc:
            self._logger.warning("Request failed for %s %s: %s", request.method, request.url, exc)
            raise TransportError(f"{request.method} {request.url} failed: {exc}") from exc

        envelope: Response[T] = Response(raw)
        if not envelope.ok:
            message = _error_message(raw)
            self._logger.warning(
                "Request failed for %s %s: %s %s", request.method, request.url, raw.status_code, message
            )
            if raw.status_code == 429:
                raise RateLimitError(
                    raw.status_code, message, retry_after=envelope.retry_after, response=envelope
                )
            raise HTTPStatusError(raw.status_code, message, response=envelope)

        if decoder is None:
            return envelope
        if not raw.content:
            raise DecodingError(
                f"Empty response body from {request.method} {request.url}", response=envelope
            )
        try:
            payload = raw.json()
        except ValueError as exc:
            self._logger.warning("Response from %s %s was not JSON", request.method, request.url)
            raise DecodingError(
                f"Response from {request.method} {request.url} was not JSON", response=envelope
            ) from exc
        try:
            envelope.data = decoder(payload)
        except (KeyError, TypeError, ValueError) as exc:
            raise DecodingError(
                f"Unexpected response shape from {request.method} {request.url}: {exc}",
                response=envelope,
            ) from exc
        return envelope

    def request(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        *,
        decoder: Optional[Decoder[T]] = None,
        timeout: Optional[float] = None,
    ) -> Response[T]:
        """Build and execute a request in one call."""
        return self.do(self.new_request(method, path, body), decoder, timeout=timeout)


def _body_params(body: Optional[Any]) -> dict[str, Any]:
    if body is None:
        return {}
    to_params = getattr(body, "to_params", None)
    if callable(to_params):
        body = to_params()
    if not isinstance(body, Mapping):
        raise EncodingError(f"Unsupported request body type {type(body).__name__}")
    return drop_none(body)


def _query_params(params: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten params into query pairs; lists become repeated ``key[]`` entries."""
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if isinstance(value, (list, tuple)):
            for item in value:
                pairs.append((f"{key}[]", _query_value(key, item)))
        else:
            pairs.append((key, _query_value(key, value)))
    return pairs


def _query_value(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, _QUERY_SCALARS):
        return str(value)
    raise EncodingError(f"Cannot encode query parameter {key!r} of type {type(value).__name__}")


def _error_message(raw: requests.Response) -> str:
    """Extract the server's error message, falling back to the reason phrase."""
    try:
        body = raw.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        # GitLab uses `message` for most errors, `error` for auth/routing ones.
        for key in ("message", "error", "error_description"):
            if body.get(key):
                return _flatten_message(body[key])
    return raw.reason or "HTTP error"


def _flatten_message(value: Any) -> str:
    if isinstance(value, dict):
        return "; ".join(f"{key}: {_flatten_message(item)}" for key, item in value.items())
    if isinstance(value, list):
        return ", ".join(_flatten_message(item) for item in value)
    return str(value)
