"""MSB-first bit packer writing through a fixed-size buffer to a byte sink."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Final, Protocol

from ..exceptions import SinkWriteFailed

_LOGGER = logging.getLogger(__name__)

BUFFER_SIZE: Final = 256
BITS_PER_BYTE: Final = 8


class ByteSink(Protocol):
    """Anything that accepts raw bytes (BytesIO, binary files, ...)."""

    def write(self, data: bytes, /) -> int | None: ...


class BitPacker:
    """Packs bits MSB-first into bytes and forwards them to a sink.

    Completed bytes are collected in an internal buffer and written to the
    sink whenever the buffer fills up. Nothing reaches the sink until the
    buffer is full or flush() is called, and flush() is never implicit:

        packer = BitPacker(stream)
        packer.write(0b101, 3)
        packer.write_bit(1)
        packer.flush()  # stream now holds b'\\xb0'

    Usage as a context manager flushes on a clean exit:

        with BitPacker(stream) as packer:
            packer.write(value, 12)
    """

    def __init__(self, sink: ByteSink, buffer_size: int = BUFFER_SIZE):
        """Initialize bit packer.

        Args:
            sink: Destination for completed bytes (must provide write())
            buffer_size: Bytes held back before a sink write (default: 256)
        """
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")

        self._sink = sink
        self._buffer = bytearray(buffer_size)
        self._buffer_pos = 0
        self._pending = 0
        self._bits_remaining = BITS_PER_BYTE
        self._bits_written = 0

    def __enter__(self) -> BitPacker:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        # Don't push a half-written stream after a failure
        if exc_type is None:
            self.flush()

    @property
    def sink(self) -> ByteSink:
        """Sink this packer writes to."""
        return self._sink

    @property
    def buffer_position(self) -> int:
        """Number of committed bytes waiting in the internal buffer."""
        return self._buffer_pos

    @property
    def bits_remaining(self) -> int:
        """Unfilled bit slots in the pending byte (8 = nothing pending)."""
        return self._bits_remaining

    @property
    def is_aligned(self) -> bool:
        """True when no partial byte is pending."""
        return self._bits_remaining == BITS_PER_BYTE

    @property
    def bits_written(self) -> int:
        """Total bits accepted since construction (padding excluded)."""
        return self._bits_written

    def write_bit(self, bit: int | bool) -> None:
        """Append a single bit to the stream.

        Args:
            bit: 0/1 or False/True

        Raises:
            ValueError: If bit is not 0 or 1
            SinkWriteFailed: If committing a full buffer fails
        """
        if bit not in (0, 1):
            raise ValueError(f"Bit must be 0 or 1, got {bit!r}")

        self._bits_remaining -= 1
        self._pending |= int(bit) << self._bits_remaining
        self._bits_written += 1

        # Commit completed bytes immediately
        if self._bits_remaining == 0:
            self._buffer[self._buffer_pos] = self._pending
            self._buffer_pos += 1
            self._pending = 0
            self._bits_remaining = BITS_PER_BYTE
            if self._buffer_pos == len(self._buffer):
                self._write_buffer()

    def write(self, value: int, nbits: int) -> None:
        """Write the lowest ``nbits`` of ``value``, MSB first.

        Args:
            value: Integer whose low bits are written
            nbits: Number of bits to write (0 is a no-op)

        Raises:
            ValueError: If nbits is negative
            SinkWriteFailed: If the sink rejects a buffer
        """
        if nbits < 0:
            raise ValueError(f"nbits must be non-negative, got {nbits}")

        for i in range(nbits - 1, -1, -1):
            self.write_bit((value >> i) & 1)

    def write_bits(self, bits: Iterable[int | bool]) -> None:
        """Write each bit of an iterable in order."""
        for bit in bits:
            self.write_bit(bit)

    def flush(self) -> None:
        """Commit any partial byte and push buffered bytes to the sink.

        The partial byte keeps zeros in its unused low bits. Afterwards the
        stream is byte aligned and nothing is buffered.

        Raises:
            SinkWriteFailed: If the sink rejects the write
        """
        if self._bits_remaining < BITS_PER_BYTE:
            self._buffer[self._buffer_pos] = self._pending
            self._buffer_pos += 1
        self._bits_remaining = BITS_PER_BYTE
        self._pending = 0

        if self._buffer_pos > 0:
            self._write_buffer()

    def _write_buffer(self) -> None:
        """Write the committed part of the buffer to the sink and reset it."""
        length = self._buffer_pos
        _LOGGER.debug("Writing %d bytes to sink", length)

        try:
            written = self._sink.write(bytes(self._buffer[:length]))
        except Exception as e:
            raise SinkWriteFailed(f"Sink write of {length} bytes failed: {e}") from e

        if written is not None and written < length:
            raise SinkWriteFailed(
                f"Sink accepted only {written} of {length} bytes",
                written=written,
                expected=length,
            )

        self._buffer_pos = 0
