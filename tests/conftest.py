"""Pytest configuration and fixtures for contouring tests."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))


@pytest.fixture
def block_values():
    """10x10 zeros with a block of ones at columns 3-5, rows 3-7."""
    values = np.zeros((10, 10))
    values[3:8, 3:6] = 1.0
    return values.ravel().tolist()


@pytest.fixture
def random_values():
    """Seeded 24x18 field with smooth bumps and noise, shape (18, 24)."""
    rng = np.random.default_rng(20240611)
    y, x = np.mgrid[0:18, 0:24]
    return np.sin(x / 3.0) * np.cos(y / 4.0) + 0.3 * rng.standard_normal((18, 24))
