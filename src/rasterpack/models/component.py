"""Single-channel sample plane model."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from ..exceptions import InvalidDimensions

MAX_PRECISION: Final = 32


@dataclass(frozen=True, slots=True, eq=False)
class Component:
    """One image component: a flat row-major plane of integer samples."""

    data: Sequence[int]
    width: int
    height: int
    precision: int = 8

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensions(
                f"Component dimensions must be positive, got {self.width}x{self.height}"
            )
        if len(self.data) != self.width * self.height:
            raise InvalidDimensions(
                f"Component data has {len(self.data)} samples, "
                f"expected {self.width * self.height} for {self.width}x{self.height}"
            )
        if not 1 <= self.precision <= MAX_PRECISION:
            raise ValueError(
                f"precision out of range: {self.precision} (must be 1-{MAX_PRECISION})"
            )

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) of the plane."""
        return self.width, self.height
