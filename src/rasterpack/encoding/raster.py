"""Pack component planes into a raw, row-aligned sample raster."""

from __future__ import annotations

import io
import logging
from collections.abc import Sequence

import numpy as np
from PIL import Image

from ..exceptions import InvalidDimensions
from ..models.component import Component
from .bitwriter import BITS_PER_BYTE, BitPacker
from .resample import resize

_LOGGER = logging.getLogger(__name__)

# Sample precision for Pillow modes, per band
_MODE_PRECISION = {
    "1": 1,
    "L": 8,
    "P": 8,
    "LA": 8,
    "RGB": 8,
    "RGBA": 8,
    "I;16": 16,
    "I": 32,
}


def row_stride(components: Sequence[Component], width: int) -> int:
    """Bytes per packed row of ``width`` pixels."""
    bits = width * sum(c.precision for c in components)
    return (bits + BITS_PER_BYTE - 1) // BITS_PER_BYTE


def pack_components(components: Sequence[Component], width: int, height: int) -> bytes:
    """Interleave component samples into a raw raster.

    Every component is first resampled to width x height. Samples are then
    written pixel by pixel, one per component in order, each with its
    component's precision (MSB first). Each row is padded with zero bits
    to a byte boundary.

    Args:
        components: Planes to interleave (at least one)
        width: Output width in pixels
        height: Output height in pixels

    Returns:
        height * row_stride(components, width) bytes

    Raises:
        ValueError: If no components are given
        InvalidDimensions: If width/height is not positive
    """
    if not components:
        raise ValueError("At least one component is required")
    if width <= 0 or height <= 0:
        raise InvalidDimensions(f"Output dimensions must be positive, got {width}x{height}")

    planes = []
    for component in components:
        plane = resize(component.data, component.width, component.height, width, height)
        if isinstance(plane, np.ndarray):
            plane = plane.tolist()
        planes.append(plane)

    precisions = [c.precision for c in components]

    _LOGGER.debug(
        "Packing %d component(s) into %dx%d raster (precisions=%s)",
        len(components),
        width,
        height,
        precisions,
    )

    sink = io.BytesIO()
    packer = BitPacker(sink)
    pos = 0
    for _ in range(height):
        for _ in range(width):
            for plane, precision in zip(planes, precisions):
                packer.write(plane[pos], precision)
            pos += 1
        packer.flush()

    return sink.getvalue()


def image_components(image: Image.Image) -> list[Component]:
    """Split a Pillow image into one Component per band.

    Raises:
        ValueError: If the image mode is not supported
    """
    precision = _MODE_PRECISION.get(image.mode)
    if precision is None:
        raise ValueError(f"Unsupported image mode: {image.mode}")

    width, height = image.size
    components = []
    for band in image.split():
        data = np.asarray(band)
        if data.dtype == np.bool_:
            data = data.astype(np.uint8)
        components.append(Component(data.ravel(), width, height, precision))
    return components


def pack_image(image: Image.Image, size: tuple[int, int] | None = None) -> bytes:
    """Pack a Pillow image into a raw raster, optionally resampled.

    Args:
        image: Source image (see _MODE_PRECISION for supported modes)
        size: Optional (width, height) to resample to; defaults to image.size

    Returns:
        Packed raster bytes
    """
    width, height = size if size is not None else image.size
    return pack_components(image_components(image), width, height)
