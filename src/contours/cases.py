"""
Marching-squares cell classification.

A cell ``(x, y)`` spans the samples TL ``(x, y)``, TR ``(x + 1, y)``,
BR ``(x + 1, y + 1)`` and BL ``(x, y + 1)``. Cells run from ``-1`` to
``width - 1`` (``height - 1``) so that the outer frame, read as "below",
closes every ring that reaches the border.

Each corner at or above the threshold sets one bit of the case code
(see ``MS_BIT_*``). For isobands every corner gets a ternary level
instead, and the resulting code splits back into one binary case per
threshold.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from shared.constants import (
    BAND_CODE_BASE,
    MS_BIT_BL,
    MS_BIT_BR,
    MS_BIT_TL,
    MS_BIT_TR,
    MS_MASK_BL_TR,
    MS_MASK_TL_BR,
    BandLevel,
)

if TYPE_CHECKING:
    from contours.grid import GridView

# ((start_dx, start_dy), (end_dx, end_dy)) relative to the cell origin
Segment = tuple[tuple[float, float], tuple[float, float]]

# Directed crossing segments per case. Crossing points are the midpoints of
# the cell edges: top (1.0, 0.5), right (1.5, 1.0), bottom (1.0, 1.5),
# left (0.5, 1.0). The "above" side is always on the same hand of travel.
# fmt: off
CASE_SEGMENTS: tuple[tuple[Segment, ...], ...] = (
    (),
    (((1.0, 1.5), (0.5, 1.0)),),
    (((1.5, 1.0), (1.0, 1.5)),),
    (((1.5, 1.0), (0.5, 1.0)),),
    (((1.0, 0.5), (1.5, 1.0)),),
    (((1.0, 1.5), (0.5, 1.0)), ((1.0, 0.5), (1.5, 1.0))),
    (((1.0, 0.5), (1.0, 1.5)),),
    (((1.0, 0.5), (0.5, 1.0)),),
    (((0.5, 1.0), (1.0, 0.5)),),
    (((1.0, 1.5), (1.0, 0.5)),),
    (((0.5, 1.0), (1.0, 0.5)), ((1.5, 1.0), (1.0, 1.5))),
    (((1.5, 1.0), (1.0, 0.5)),),
    (((0.5, 1.0), (1.5, 1.0)),),
    (((1.0, 1.5), (1.5, 1.0)),),
    (((0.5, 1.0), (1.0, 1.5)),),
    (),
)
# fmt: on

# Saddles whose centre is above the threshold: the above corners connect
# through the cell, so the two below corners are cut off instead
# (same segments as cases 7 + 13 and 14 + 11).
JOINED_SADDLE_SEGMENTS: dict[int, tuple[Segment, ...]] = {
    MS_MASK_BL_TR: (((1.0, 0.5), (0.5, 1.0)), ((1.0, 1.5), (1.5, 1.0))),
    MS_MASK_TL_BR: (((0.5, 1.0), (1.0, 1.5)), ((1.5, 1.0), (1.0, 0.5))),
}

# Corner order used by ternary codes, least significant digit first
_BAND_DIGIT_BITS = (MS_BIT_BL, MS_BIT_BR, MS_BIT_TR, MS_BIT_TL)


def _is_above(grid: GridView, x: int, y: int, threshold: float) -> bool:
    return grid.contains(x, y) and bool(grid.values[y, x] >= threshold)


def _level(grid: GridView, x: int, y: int, lower: float, upper: float) -> int:
    if _is_above(grid, x, y, upper):
        return BandLevel.ABOVE
    if _is_above(grid, x, y, lower):
        return BandLevel.INSIDE
    return BandLevel.BELOW


def classify(grid: GridView, x: int, y: int, threshold: float) -> int:
    """Case code in ``[0, 15]`` of cell ``(x, y)``; ties count as above."""
    case = 0
    if _is_above(grid, x, y + 1, threshold):
        case |= MS_BIT_BL
    if _is_above(grid, x + 1, y + 1, threshold):
        case |= MS_BIT_BR
    if _is_above(grid, x + 1, y, threshold):
        case |= MS_BIT_TR
    if _is_above(grid, x, y, threshold):
        case |= MS_BIT_TL
    return case


def classify_cells(mask: np.ndarray) -> np.ndarray:
    """
    Case codes of every cell from a padded ``above_mask``.

    Entry ``[j, i]`` of the (height + 1, width + 1) result is the case of
    cell ``(i - 1, j - 1)``.
    """
    m = mask.astype(np.uint8)
    tl = m[:-1, :-1]
    tr = m[:-1, 1:]
    br = m[1:, 1:]
    bl = m[1:, :-1]
    return bl | (br << 1) | (tr << 2) | (tl << 3)


def classify_band(grid: GridView, x: int, y: int, lower: float, upper: float) -> int:
    """Ternary code in ``[0, 80]`` of cell ``(x, y)`` against ``(lower, upper)``."""
    return (
        _level(grid, x, y + 1, lower, upper)
        + BAND_CODE_BASE * _level(grid, x + 1, y + 1, lower, upper)
        + BAND_CODE_BASE**2 * _level(grid, x + 1, y, lower, upper)
        + BAND_CODE_BASE**3 * _level(grid, x, y, lower, upper)
    )


def classify_band_cells(levels: np.ndarray) -> np.ndarray:
    """Ternary codes of every cell from a padded ``level_mask``."""
    lv = levels.astype(np.int16)
    return (
        lv[1:, :-1]
        + BAND_CODE_BASE * lv[1:, 1:]
        + BAND_CODE_BASE**2 * lv[:-1, 1:]
        + BAND_CODE_BASE**3 * lv[:-1, :-1]
    )


def _split_band_code(code: int) -> tuple[int, int]:
    lower_case = 0
    upper_case = 0
    for bit in _BAND_DIGIT_BITS:
        code, digit = divmod(code, BAND_CODE_BASE)
        if digit >= BandLevel.INSIDE:
            lower_case |= bit
        if digit == BandLevel.ABOVE:
            upper_case |= bit
    return lower_case, upper_case


BAND_CASE_SPLIT: tuple[tuple[int, int], ...] = tuple(
    _split_band_code(code) for code in range(BAND_CODE_BASE**4)
)


def split_band_code(code: int) -> tuple[int, int]:
    """Binary cases ``(lower, upper)`` hidden in a ternary band code."""
    return BAND_CASE_SPLIT[code]
