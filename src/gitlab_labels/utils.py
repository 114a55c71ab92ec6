"""Shared helpers for the GitLab client."""

from __future__ import annotations

from typing import Any, Mapping, Optional


def drop_none(values: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``values`` without the keys whose value is ``None``."""
    return {key: value for key, value in values.items() if value is not None}


def int_or_none(value: Optional[str]) -> Optional[int]:
    """Parse an integer header value, treating blanks and garbage as missing."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None
