"""Data models."""

from .component import MAX_PRECISION, Component

__all__ = [
    "Component",
    "MAX_PRECISION",
]
