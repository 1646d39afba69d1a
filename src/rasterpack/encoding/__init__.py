"""Bit packing and resampling."""

from .bitwriter import BITS_PER_BYTE, BUFFER_SIZE, BitPacker, ByteSink
from .raster import image_components, pack_components, pack_image, row_stride
from .resample import SINGLE_BAND_MODES, resize, resize_image

__all__ = [
    "BitPacker",
    "ByteSink",
    "BUFFER_SIZE",
    "BITS_PER_BYTE",
    "resize",
    "resize_image",
    "SINGLE_BAND_MODES",
    "pack_components",
    "pack_image",
    "image_components",
    "row_stride",
]
