from enum import IntEnum

# --- Marching squares: cell case codes
# Bit layout of a case code (grid rows grow downward), cell (x, y):
# b0: BL (x, y + 1), b1: BR (x + 1, y + 1), b2: TR (x + 1, y), b3: TL (x, y)
MS_BIT_BL = 1
MS_BIT_BR = 2
MS_BIT_TR = 4
MS_BIT_TL = 8

# Empty and full masks (every corner below / at-or-above the threshold)
MS_MASK_EMPTY = 0  # 0b0000
MS_MASK_FULL = 15  # 0b1111

# Diagonal (saddle) cases, ambiguous without resolving the cell centre
MS_MASK_BL_TR = 5  # 0b0101
MS_MASK_TL_BR = 10  # 0b1010

# Cases without any crossing
MS_NO_CONTOUR_CASES = frozenset({MS_MASK_EMPTY, MS_MASK_FULL})
MS_SADDLE_CASES = frozenset({MS_MASK_BL_TR, MS_MASK_TL_BR})

# Weight for averaging the four corner values of a cell (1/4)
MARCHING_SQUARES_CENTER_WEIGHT = 0.25


# --- Isobands: per-corner ternary classification
class BandLevel(IntEnum):
    """Position of a sample relative to a (min, max) threshold pair."""

    BELOW = 0
    INSIDE = 1
    ABOVE = 2


# Base of the ternary cell code (digits ordered BL, BR, TR, TL)
BAND_CODE_BASE = 3
# Uniform cells: every corner in the same class, no crossing
BAND_CODE_ALL_BELOW = 0
BAND_CODE_ALL_INSIDE = 40  # 1 + 3 + 9 + 27
BAND_CODE_ALL_ABOVE = 80  # 2 * 40
BAND_NO_CONTOUR_CODES = frozenset(
    {BAND_CODE_ALL_BELOW, BAND_CODE_ALL_INSIDE, BAND_CODE_ALL_ABOVE}
)

# --- Rings
# Smallest closed ring: three distinct points plus the closing one
MIN_RING_POINTS = 4
# Isobands need at least one (min, max) pair
MIN_BAND_THRESHOLDS = 2

# Value returned for lookups outside the grid (below any real threshold)
OUTSIDE_GRID_VALUE = float('-inf')

# --- Grid settings defaults
DEFAULT_SMOOTH = True
DEFAULT_X_ORIGIN = 0.0
DEFAULT_Y_ORIGIN = 0.0
DEFAULT_X_STEP = 1.0
DEFAULT_Y_STEP = 1.0

# --- Command line
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
EXIT_INPUT_ERROR = 2
