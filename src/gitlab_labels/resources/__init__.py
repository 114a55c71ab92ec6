"""Resource module exports."""

from .labels import Labels

__all__ = [
    "Labels",
]
