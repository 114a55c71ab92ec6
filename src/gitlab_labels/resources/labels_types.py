"""Types for the labels resource.

Raw payloads are ``TypedDict``s; callers get :class:`Label` values built from
them. Option bags keep ``None`` for "not sent", never an empty string.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional, TypedDict
from typing_extensions import ReadOnly, Required

from ._common_types import _normalize_color
from ..utils import drop_none


class LabelPayload(TypedDict, total=False):
    """Readonly label dict returned by label endpoints."""
    id: ReadOnly[int]
    name: Required[ReadOnly[str]]
    color: Required[ReadOnly[str]]
    text_color: ReadOnly[str]
    description: ReadOnly[Optional[str]]
    open_issues_count: ReadOnly[int]
    closed_issues_count: ReadOnly[int]
    open_merge_requests_count: ReadOnly[int]
    subscribed: ReadOnly[bool]
    priority: ReadOnly[Optional[int]]


@dataclass(frozen=True)
class Label:
    """A named, colored tag within a project."""

    name: str
    color: str
    id: Optional[int] = None
    text_color: Optional[str] = None
    description: Optional[str] = None
    open_issues_count: Optional[int] = None
    closed_issues_count: Optional[int] = None
    open_merge_requests_count: Optional[int] = None
    subscribed: Optional[bool] = None
    priority: Optional[int] = None

    @classmethod
    def from_payload(cls, payload: LabelPayload | Any) -> "Label":
        """Build a label from a decoded JSON object.

        Raises ``TypeError`` when the payload is not an object and ``KeyError``
        when ``name`` or ``color`` is missing.
        """
        if not isinstance(payload, dict):
            raise TypeError(f"Expected label object, got {type(payload).__name__}")
        return cls(
            name=payload["name"],
            color=payload["color"],
            id=payload.get("id"),
            text_color=payload.get("text_color"),
            description=payload.get("description"),
            open_issues_count=payload.get("open_issues_count"),
            closed_issues_count=payload.get("closed_issues_count"),
            open_merge_requests_count=payload.get("open_merge_requests_count"),
            subscribed=payload.get("subscribed"),
            priority=payload.get("priority"),
        )

    def __str__(self) -> str:
        return f"Label(name={self.name!r}, color={self.color!r})"


def decode_label(payload: Any) -> Label:
    return Label.from_payload(payload)


def decode_labels(payload: Any) -> list[Label]:
    if not isinstance(payload, list):
        raise TypeError(f"Expected list of labels, got {type(payload).__name__}")
    return [Label.from_payload(item) for item in payload]


class _Options:
    def to_params(self) -> dict[str, Any]:
        """Wire parameters, omitting every field left as ``None``."""
        return drop_none(asdict(self))  # type: ignore[call-overload]


@dataclass(frozen=True)
class ListLabelsOptions(_Options):
    page: Optional[int] = None
    per_page: Optional[int] = None
    with_counts: Optional[bool] = None
    search: Optional[str] = None


@dataclass(frozen=True)
class CreateLabelOptions(_Options):
    """Fields for a new label. ``color`` also accepts RGB tuples and packed ints."""

    name: Optional[str] = None
    color: Optional[Any] = None
    description: Optional[str] = None
    priority: Optional[int] = None

    def to_params(self) -> dict[str, Any]:
        params = super().to_params()
        if "color" in params:
            params["color"] = _normalize_color(params["color"])
        return params


@dataclass(frozen=True)
class UpdateLabelOptions(_Options):
    """Fields for editing a label identified by ``name``.

    At least one of ``new_name``, ``color``, ``description`` or ``priority``
    is needed; the server rejects an update without one.
    """

    name: Optional[str] = None
    new_name: Optional[str] = None
    color: Optional[Any] = None
    description: Optional[str] = None
    priority: Optional[int] = None

    def to_params(self) -> dict[str, Any]:
        params = super().to_params()
        if "color" in params:
            params["color"] = _normalize_color(params["color"])
        return params


@dataclass(frozen=True)
class DeleteLabelOptions(_Options):
    name: Optional[str] = None


__all__ = [
    "CreateLabelOptions",
    "DeleteLabelOptions",
    "Label",
    "LabelPayload",
    "ListLabelsOptions",
    "UpdateLabelOptions",
]
