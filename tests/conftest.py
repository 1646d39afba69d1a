"""Shared fixtures for rasterpack tests."""

from __future__ import annotations

import pytest


class RecordingSink:
    """Byte sink that keeps every write call separately."""

    def __init__(self):
        self.writes: list[bytes] = []

    def write(self, data: bytes) -> int:
        self.writes.append(bytes(data))
        return len(data)

    @property
    def data(self) -> bytes:
        return b"".join(self.writes)


class FailingSink:
    """Byte sink whose writes always raise."""

    def write(self, data: bytes) -> int:
        raise OSError("disk full")


class ShortSink:
    """Byte sink that accepts only part of each write."""

    def write(self, data: bytes) -> int:
        return len(data) - 1


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def failing_sink() -> FailingSink:
    return FailingSink()


@pytest.fixture
def short_sink() -> ShortSink:
    return ShortSink()


def read_bits(data: bytes, nbits: int) -> int:
    """Read the first ``nbits`` of ``data`` MSB first."""
    if nbits == 0:
        return 0
    return int.from_bytes(data, "big") >> (len(data) * 8 - nbits)


@pytest.fixture
def read_bits_fn():
    return read_bits
