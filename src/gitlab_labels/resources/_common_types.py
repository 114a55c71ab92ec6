"""Shared types and normalization helpers for resources.

This module contains:
- Project identifiers (numeric ID or ``namespace/name`` path) and their
  URL path-segment encoding
- Color input normalization (used by labels)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union
from urllib.parse import quote

from ..errors import ValidationError


# --- Project Identifiers --- #
@dataclass(frozen=True)
class NumericID:
    """Project referenced by its numeric ID."""

    value: int

    def path_segment(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class PathName:
    """Project referenced by its ``namespace/name`` path."""

    value: str

    def path_segment(self) -> str:
        # Every reserved character is escaped, `/` and space included.
        return quote(self.value, safe="")


ProjectRef = Union[NumericID, PathName]
ProjectInput = Union[int, str, NumericID, PathName]


def parse_id(value: object) -> ProjectRef:
    """Normalize a project identifier.

    Parameters
    ----------
    value
        Numeric ID (``int``), path (``str``, e.g. ``"group/project"``), or an
        existing :class:`NumericID` / :class:`PathName`.

    Returns
    -------
    NumericID or PathName
        Tagged identifier whose ``path_segment()`` is safe to put in a URL.

    Raises
    ------
    ValidationError
        If the value is not an accepted type, is an integer below 1, or is
        an empty string.
    """
    if isinstance(value, (NumericID, PathName)):
        value = value.value
    if isinstance(value, bool):
        raise ValidationError(f"Invalid project identifier: {value!r}")
    if isinstance(value, int):
        if value < 1:
            raise ValidationError(f"Invalid project identifier: {value!r}")
        return NumericID(value)
    if isinstance(value, str):
        if not value.strip():
            raise ValidationError("Invalid project identifier: empty string")
        return PathName(value)
    raise ValidationError(f"Invalid project identifier type: {type(value).__name__}")


def project_path(project: object, *parts: str) -> str:
    """Return ``projects/{id}/<parts...>`` with the identifier encoded."""
    segment = parse_id(project).path_segment()
    return "/".join(("projects", segment) + parts)


# --- Color Normalization --- #
def _normalize_color(value: object) -> str | None:
    """Normalize color inputs to a string GitLab accepts.

    Parameters
    ----------
    value
        Color input. Supported forms:
        - ``None`` (the color is not sent)
        - Strings, passed through unchanged (``"#ff0000"``, ``"red"``, ...);
          the server decides whether they are valid
        - RGB/RGBA tuples or lists (ints 0-255 or floats 0-1, alpha dropped)
        - Packed RGB integer (``0xRRGGBB``, ``0xAARRGGBB``)

    Returns
    -------
    str or None
        The color string, or ``#rrggbb`` for tuple and integer inputs.

    Raises
    ------
    ValidationError
        If the input type cannot represent a color.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value

    if isinstance(value, bool):
        raise ValidationError(f"Unsupported color input {value!r}")

    if isinstance(value, int):
        if value < 0:
            raise ValidationError(f"Negative packed int {value!r}")
        if value > 0xFFFFFF:
            value = value & 0xFFFFFF
        return _hex_color(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))

    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        rgb_values = value[:3]
        if all(isinstance(channel, (int, float)) and not isinstance(channel, bool) for channel in rgb_values):
            rgb = []
            for channel in rgb_values:
                channel_value = float(channel)
                if isinstance(channel, float) and channel_value <= 1:
                    channel_value *= 255
                rgb.append(int(max(0, min(255, round(channel_value)))))
            return _hex_color((rgb[0], rgb[1], rgb[2]))
        raise ValidationError(f"Invalid RGB tuple values {value!r}")

    raise ValidationError(f"Unsupported color input type {type(value).__name__}")


def _hex_color(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)
