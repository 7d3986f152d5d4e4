"""Tests for crossing interpolation."""

import math

import pytest

from contours.grid import GridView
from contours.smoothing import smooth_point, smooth_ring
from contours.tracer import trace_rings


@pytest.fixture
def ramp():
    """Values 0, 1, 2, 3 along x, same on both rows."""
    return GridView.from_values([0.0, 1.0, 2.0, 3.0] * 2, 4, 2)


class TestSmoothPoint:
    """Tests for smooth_point."""

    def test_vertical_edge_crossing(self, ramp):
        """Integer x moves along the row between the two samples."""
        # samples (1, 0) = 1 and (2, 0) = 2, centres at x = 1.5 and 2.5
        assert smooth_point((2.0, 0.5), ramp, 1.25) == (1.75, 0.5)

    def test_midpoint_when_threshold_halfway(self, ramp):
        assert smooth_point((2.0, 0.5), ramp, 1.5) == (2.0, 0.5)

    def test_horizontal_edge_crossing(self):
        grid = GridView.from_values([0.0, 0.0, 4.0, 4.0], 2, 2)
        assert smooth_point((0.5, 1.0), grid, 1.0) == (0.5, 0.75)

    def test_frame_crossings_stay(self, ramp):
        """Crossings on the outer frame have one real sample and stay put."""
        assert smooth_point((0.0, 0.5), ramp, 0.5) == (0.0, 0.5)
        assert smooth_point((4.0, 1.5), ramp, 2.5) == (4.0, 1.5)
        assert smooth_point((1.5, 0.0), ramp, 0.5) == (1.5, 0.0)

    def test_equal_samples_keep_midpoint(self):
        grid = GridView.from_values([1.0, 1.0], 2, 1)
        assert smooth_point((1.0, 0.5), grid, 1.0) == (1.0, 0.5)

    def test_nan_keeps_midpoint(self):
        grid = GridView.from_values([math.nan, 1.0], 2, 1)
        assert smooth_point((1.0, 0.5), grid, 0.5) == (1.0, 0.5)


class TestSmoothRing:
    """Tests for smooth_ring."""

    def test_returns_new_ring(self, ramp):
        ring = [(2.0, 0.5), (2.0, 1.5), (2.0, 0.5)]
        smoothed = smooth_ring(ring, ramp, 1.25)
        assert smoothed == [(1.75, 0.5), (1.75, 1.5), (1.75, 0.5)]
        assert ring[0] == (2.0, 0.5)

    def test_stays_on_edge_segment(self, random_values):
        """Smoothed crossings never leave the segment between their samples."""
        grid = GridView.from_values(random_values, 24, 18)
        for ring in trace_rings(grid, 0.2):
            for (x, y), (sx, sy) in zip(ring, smooth_ring(ring, grid, 0.2)):
                if x.is_integer():
                    assert sy == y
                    assert x - 0.5 <= sx <= x + 0.5
                else:
                    assert sx == x
                    assert y - 0.5 <= sy <= y + 0.5
