"""rasterpack.

  Integer resampling and MSB-first bit packing for raw image rasters.
  """

from .encoding import (
    BUFFER_SIZE,
    BitPacker,
    ByteSink,
    image_components,
    pack_components,
    pack_image,
    resize,
    resize_image,
    row_stride,
)
from .exceptions import InvalidDimensions, RasterPackError, SinkWriteFailed
from .models import MAX_PRECISION, Component

__version__ = "0.1.0"

__all__ = [
    # Main API
    "BitPacker",
    "resize",
    "resize_image",
    "pack_components",
    "pack_image",
    # Exceptions
    "RasterPackError",
    "SinkWriteFailed",
    "InvalidDimensions",
    # Models
    "Component",
    "ByteSink",
    # Utilities
    "image_components",
    "row_stride",
    # Constants
    "BUFFER_SIZE",
    "MAX_PRECISION",
]
