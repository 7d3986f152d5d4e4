"""Errors raised for malformed contouring input.

All of them are detected before any tracing starts; once a grid and its
thresholds have been accepted the engine does not fail.
"""

from __future__ import annotations


class ContourError(ValueError):
    """Base class for invalid contouring input."""


class InvalidDimensionsError(ContourError):
    """Value buffer does not match width * height, or a dimension is zero."""


class EmptyThresholdsError(ContourError):
    """No threshold was supplied where at least one is required."""


class InvalidBandThresholdsError(ContourError):
    """Isoband thresholds are fewer than two or not strictly increasing."""
