"""Integer nearest-neighbour resampling of single-channel pixel planes."""

from __future__ import annotations

import logging
from collections.abc import MutableSequence, Sequence

import numpy as np
from PIL import Image

from ..exceptions import InvalidDimensions

_LOGGER = logging.getLogger(__name__)

# Pillow modes holding exactly one sample per pixel
SINGLE_BAND_MODES = ("1", "L", "P", "I", "I;16")


def _check_dimensions(pixels: Sequence[int], org_width: int, org_height: int,
                      width: int, height: int) -> None:
    for name, value in (("org_width", org_width), ("org_height", org_height),
                        ("width", width), ("height", height)):
        if value <= 0:
            raise InvalidDimensions(f"{name} must be positive, got {value}")
    if len(pixels) != org_width * org_height:
        raise InvalidDimensions(
            f"Pixel buffer has {len(pixels)} samples, "
            f"expected {org_width * org_height} for {org_width}x{org_height}"
        )


def resize(
        pixels: Sequence[int],
        org_width: int,
        org_height: int,
        width: int,
        height: int,
) -> Sequence[int]:
    """Resample a flat row-major pixel plane to new dimensions.

    Nearest-neighbour selection driven by integer error accumulators
    (Bresenham stepping), so results are exact and platform independent.
    Whenever the source row does not advance between two output rows the
    previous output row is copied instead of being recomputed.

    Args:
        pixels: org_width * org_height samples, row-major
        org_width: Source width
        org_height: Source height
        width: Target width
        height: Target height

    Returns:
        width * height samples. A numpy array input gives an array of the
        same dtype, anything else a list. When the dimensions are unchanged
        ``pixels`` itself is returned, not a copy.

    Raises:
        InvalidDimensions: If a dimension is not positive or the buffer
            length doesn't match org_width * org_height
    """
    _check_dimensions(pixels, org_width, org_height, width, height)

    if org_width == width and org_height == height:
        return pixels

    _LOGGER.debug("Resampling %dx%d -> %dx%d", org_width, org_height, width, height)

    dest: MutableSequence[int]
    if isinstance(pixels, np.ndarray):
        dest = np.empty(width * height, dtype=pixels.dtype)
    else:
        dest = [0] * (width * height)

    # Whole source rows/columns per output step, plus the remainder that
    # is accumulated until it adds up to one more row/column.
    row_step = (org_height // height) * org_width
    row_fraction_step = org_height % height
    col_step = org_width // width
    col_fraction_step = org_width % width

    vfrac = 0
    source_row_pos = 0
    last_row_pos = -1
    dest_pos = 0

    for _ in range(height):
        if source_row_pos == last_row_pos:
            dest[dest_pos:dest_pos + width] = dest[dest_pos - width:dest_pos]
            dest_pos += width
        else:
            hfrac = 0
            source_pos = source_row_pos
            for _ in range(width):
                dest[dest_pos] = pixels[source_pos]
                dest_pos += 1
                source_pos += col_step
                hfrac += col_fraction_step
                if hfrac >= width:
                    hfrac -= width
                    source_pos += 1
            last_row_pos = source_row_pos

        source_row_pos += row_step
        vfrac += row_fraction_step
        if vfrac >= height:
            vfrac -= height
            source_row_pos += org_width

    return dest


def resize_image(image: Image.Image, size: tuple[int, int]) -> Image.Image:
    """Resample a single-band Pillow image with :func:`resize`.

    Args:
        image: Image in one of SINGLE_BAND_MODES
        size: (width, height) of the result

    Returns:
        New image of the same mode (palette kept for mode 'P'), or
        ``image`` itself when it already has the requested size

    Raises:
        ValueError: If the image has more than one band
        InvalidDimensions: If size is not positive
    """
    if image.mode not in SINGLE_BAND_MODES:
        raise ValueError(f"Expected single-band image, got {image.mode}")

    width, height = size
    org_width, org_height = image.size
    if (org_width, org_height) == (width, height):
        return image

    # Mode '1' arrays come back as bool; widen so samples stay 0/1 ints
    plane = np.asarray(image)
    if plane.dtype == np.bool_:
        plane = plane.astype(np.uint8)

    resized = resize(plane.ravel(), org_width, org_height, width, height)
    resized = np.asarray(resized).reshape(height, width)
    if image.mode == "1":
        return Image.fromarray(resized.astype(np.bool_))

    result = Image.fromarray(resized)
    if image.mode == "P":
        # putpalette() turns the L image back into P
        result.putpalette(image.getpalette())
    return result
