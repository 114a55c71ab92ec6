"""Immutable client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, Optional
from urllib.parse import urlsplit

from .errors import ConfigurationError

AuthMethod = Literal["private_token", "oauth", "job_token"]

DEFAULT_BASE_URL = "https://gitlab.com/api/v4/"
DEFAULT_TIMEOUT = 20.0
USER_AGENT = "gitlab-labels-python"


@dataclass(frozen=True, repr=False)
class ClientConfig:
    """Connection settings shared by every request a client makes.

    Parameters
    ----------
    base_url
        API root, e.g. ``https://gitlab.example.com/api/v4/``. Relative
        request paths are resolved against it.
    token
        Access token; ``None`` sends unauthenticated requests.
    auth_method
        How ``token`` is sent: ``"private_token"`` (``PRIVATE-TOKEN`` header),
        ``"oauth"`` (``Authorization: Bearer``) or ``"job_token"``
        (``JOB-TOKEN`` header).
    user_agent
        Value of the ``User-Agent`` header.
    default_timeout
        Timeout in seconds used when a call does not pass its own.
    """

    base_url: Optional[str] = DEFAULT_BASE_URL
    token: Optional[str] = None
    auth_method: AuthMethod = "private_token"
    user_agent: str = USER_AGENT
    default_timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, **overrides: object) -> "ClientConfig":
        """Build a config from ``GITLAB_*`` environment variables, read at call time.

        Raises ``ConfigurationError`` when ``GITLAB_TIMEOUT`` is not a number.
        """
        values: dict[str, object] = {
            "base_url": os.environ.get("GITLAB_URL", DEFAULT_BASE_URL),
            "token": os.environ.get("GITLAB_TOKEN"),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        if "default_timeout" not in values:
            raw_timeout = os.environ.get("GITLAB_TIMEOUT")
            if raw_timeout is not None and raw_timeout.strip():
                try:
                    values["default_timeout"] = float(raw_timeout)
                except ValueError as exc:
                    raise ConfigurationError(f"Invalid GITLAB_TIMEOUT: {raw_timeout!r}") from exc
        return cls(**values)  # type: ignore[arg-type]

    def api_root(self) -> str:
        """Return the validated base URL, always ending in ``/``."""
        base_url = (self.base_url or "").strip()
        if not base_url:
            raise ConfigurationError("Base URL is not configured")
        parts = urlsplit(base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(f"Invalid base URL: {base_url!r}")
        if not base_url.endswith("/"):
            base_url += "/"
        return base_url

    def auth_headers(self) -> dict[str, str]:
        """Return the authentication headers for ``token``."""
        if not self.token:
            return {}
        if self.auth_method == "oauth":
            return {"Authorization": f"Bearer {self.token}"}
        if self.auth_method == "job_token":
            return {"JOB-TOKEN": self.token}
        if self.auth_method == "private_token":
            return {"PRIVATE-TOKEN": self.token}
        raise ConfigurationError(f"Unsupported auth method: {self.auth_method!r}")

    def __repr__(self) -> str:
        token = "***" if self.token else None
        return (
            f"ClientConfig(base_url={self.base_url!r}, token={token!r}, "
            f"auth_method={self.auth_method!r}, user_agent={self.user_agent!r}, "
            f"default_timeout={self.default_timeout!r})"
        )
