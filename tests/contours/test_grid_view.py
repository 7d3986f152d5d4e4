"""Tests for the read-only grid view."""

import math

import numpy as np
import pytest

from contours.errors import ContourError, InvalidDimensionsError
from contours.grid import GridView


class TestFromValues:
    """Tests for GridView.from_values."""

    def test_flat_buffer_is_row_major(self):
        """Sample (x, y) of a flat buffer is element y * width + x."""
        grid = GridView.from_values([0, 1, 2, 3, 4, 5], 3, 2)
        assert grid.values.shape == (2, 3)
        assert grid.value_at(2, 0) == 2.0
        assert grid.value_at(0, 1) == 3.0

    def test_accepts_2d_array(self):
        """A (height, width) array is taken as is."""
        arr = np.arange(12, dtype=float).reshape(3, 4)
        grid = GridView.from_values(arr, 4, 3)
        assert grid.value_at(3, 2) == 11.0

    def test_values_are_read_only(self):
        """The wrapped array cannot be written through."""
        grid = GridView.from_values([1.0, 2.0], 2, 1)
        with pytest.raises(ValueError):
            grid.values[0, 0] = 5.0

    def test_source_buffer_is_copied(self):
        """Later changes to the source do not leak into the view."""
        source = np.zeros((2, 2))
        grid = GridView.from_values(source, 2, 2)
        source[0, 0] = 7.0
        assert grid.value_at(0, 0) == 0.0

    def test_length_mismatch(self):
        """A buffer of the wrong length is rejected."""
        with pytest.raises(InvalidDimensionsError):
            GridView.from_values([0.0] * 5, 2, 3)

    def test_wrong_2d_shape(self):
        """A transposed array is rejected even with the right size."""
        with pytest.raises(InvalidDimensionsError):
            GridView.from_values(np.zeros((4, 3)), 4, 3)

    @pytest.mark.parametrize(('width', 'height'), [(0, 3), (3, 0), (0, 0)])
    def test_zero_dimension(self, width, height):
        """Zero width or height is rejected."""
        with pytest.raises(InvalidDimensionsError):
            GridView.from_values([], width, height)

    def test_error_is_value_error(self):
        """Dimension errors are ValueErrors."""
        with pytest.raises(ValueError):
            GridView.from_values([1.0], 2, 2)
        assert issubclass(InvalidDimensionsError, ContourError)


class TestLookups:
    """Tests for sample and corner lookups."""

    def test_outside_is_below_everything(self):
        """Lookups outside the grid return negative infinity."""
        grid = GridView.from_values([1.0] * 4, 2, 2)
        for x, y in [(-1, 0), (0, -1), (2, 0), (0, 2)]:
            assert grid.value_at(x, y) == -math.inf

    def test_cell_corners_order(self):
        """Corners come back as TL, TR, BR, BL."""
        grid = GridView.from_values([1.0, 2.0, 3.0, 4.0], 2, 2)
        assert grid.cell_corners(0, 0) == (1.0, 2.0, 4.0, 3.0)

    def test_cell_corners_on_frame(self):
        """Frame cells mix real samples with the outside value."""
        grid = GridView.from_values([1.0, 2.0, 3.0, 4.0], 2, 2)
        tl, tr, br, bl = grid.cell_corners(-1, -1)
        assert (tl, tr, bl) == (-math.inf, -math.inf, -math.inf)
        assert br == 1.0


class TestMasks:
    """Tests for above_mask and level_mask."""

    def test_above_mask_padding(self):
        """The mask has a one-sample False frame."""
        grid = GridView.from_values([1.0] * 6, 3, 2)
        mask = grid.above_mask(0.5)
        assert mask.shape == (4, 5)
        assert mask[1:-1, 1:-1].all()
        assert not mask[0].any()
        assert not mask[-1].any()
        assert not mask[:, 0].any()
        assert not mask[:, -1].any()

    def test_above_mask_tie_counts_as_above(self):
        """A sample equal to the threshold is above."""
        grid = GridView.from_values([0.5], 1, 1)
        assert grid.above_mask(0.5)[1, 1]

    def test_above_mask_nan_is_below(self):
        """NaN samples never count as above."""
        grid = GridView.from_values([math.nan, 1.0], 2, 1)
        mask = grid.above_mask(0.0)
        assert not mask[1, 1]
        assert mask[1, 2]

    def test_level_mask(self):
        """Levels are 0 below, 1 inside and 2 at or above the upper bound."""
        grid = GridView.from_values([0.0, 1.0, 2.0, math.nan], 4, 1)
        levels = grid.level_mask(1.0, 2.0)
        assert levels.shape == (3, 6)
        assert levels[1, 1:-1].tolist() == [0, 1, 2, 0]
