"""Read-only view over a rectangular grid of scalar samples."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from contours.errors import InvalidDimensionsError
from shared.constants import OUTSIDE_GRID_VALUE

if TYPE_CHECKING:
    from collections.abc import Sequence

GRID_NDIM = 2


@dataclass(frozen=True, eq=False)
class GridView:
    """
    Samples of a ``width`` x ``height`` grid stored as a (height, width) array.

    Sample ``(x, y)`` is the value at column ``x`` of row ``y`` and sits at
    the centre of the unit square ``[x, x + 1] x [y, y + 1]``.
    """

    width: int
    height: int
    values: np.ndarray

    @classmethod
    def from_values(
        cls,
        values: Sequence[float] | np.ndarray,
        width: int,
        height: int,
    ) -> GridView:
        """
        Validate and wrap a row-major buffer or a (height, width) array.

        Raises:
            InvalidDimensionsError: if a dimension is not positive or the
                buffer does not hold exactly ``width * height`` samples.

        """
        if width <= 0 or height <= 0:
            msg = f'Grid dimensions must be positive, got {width}x{height}'
            raise InvalidDimensionsError(msg)
        arr = np.array(values, dtype=np.float64)
        if arr.ndim == GRID_NDIM and arr.shape != (height, width):
            msg = (
                f'Grid array of shape {arr.shape} does not match '
                f'(height, width) = ({height}, {width})'
            )
            raise InvalidDimensionsError(msg)
        if arr.size != width * height:
            msg = (
                f'The length of provided values ({arr.size}) does not match '
                f'the {width}x{height} dimensions of the grid'
            )
            raise InvalidDimensionsError(msg)
        arr = arr.reshape(height, width)
        arr.flags.writeable = False
        return cls(width=width, height=height, values=arr)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def value_at(self, x: int, y: int) -> float:
        """Sample at column ``x``, row ``y``; below any threshold outside."""
        if not self.contains(x, y):
            return OUTSIDE_GRID_VALUE
        return float(self.values[y, x])

    def cell_corners(self, x: int, y: int) -> tuple[float, float, float, float]:
        """Corner values (TL, TR, BR, BL) of the cell whose top-left is (x, y)."""
        return (
            self.value_at(x, y),
            self.value_at(x + 1, y),
            self.value_at(x + 1, y + 1),
            self.value_at(x, y + 1),
        )

    def above_mask(self, threshold: float) -> np.ndarray:
        """
        Boolean mask of samples ``>= threshold`` padded by one row/column.

        The padding is False on every side, which is how the outside sentinel
        classifies against any threshold. NaN samples compare False as well.
        """
        padded = np.zeros((self.height + 2, self.width + 2), dtype=bool)
        with np.errstate(invalid='ignore'):
            padded[1:-1, 1:-1] = self.values >= threshold
        return padded

    def level_mask(self, lower: float, upper: float) -> np.ndarray:
        """
        Padded per-sample ternary levels against ``(lower, upper)``.

        0 below ``lower``, 1 in ``[lower, upper)``, 2 at or above ``upper``.
        """
        padded = np.zeros((self.height + 2, self.width + 2), dtype=np.uint8)
        with np.errstate(invalid='ignore'):
            padded[1:-1, 1:-1] = (self.values >= lower).astype(np.uint8) + (
                self.values >= upper
            ).astype(np.uint8)
        return padded
