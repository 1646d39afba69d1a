"""Exceptions raised by rasterpack."""

from __future__ import annotations


class RasterPackError(Exception):
    """Base exception for all rasterpack errors."""


class SinkWriteFailed(RasterPackError):
    """Raised when the byte sink rejects or truncates a write.

    The packer that raised it must not be used again.
    """

    def __init__(self, message: str, written: int | None = None, expected: int | None = None):
        super().__init__(message)
        self.written = written
        self.expected = expected


class InvalidDimensions(RasterPackError, ValueError):
    """Raised when image dimensions or buffer lengths don't add up."""
