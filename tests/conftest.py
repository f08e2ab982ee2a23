"""
Shared fixtures for the SPD Lab test suite.
"""
import os
import sys

import numpy as np
import pytest

# Add repository root to path (flat layout)
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from models.constants import CANONICAL_GRID
from models.core import SpectralDataset, WeightingFunction
from services.weighting import WeightingTables, get_weighting_tables


@pytest.fixture(scope="session")
def tables() -> WeightingTables:
    return get_weighting_tables()


@pytest.fixture
def flat_spectrum() -> SpectralDataset:
    """Two channels, constant 1.0 and 2.0 W/(m² nm) across the visible band."""
    return SpectralDataset.from_rows([(380.0, [1.0, 2.0]), (780.0, [1.0, 2.0])])


@pytest.fixture
def canonical_rows() -> SpectralDataset:
    """A single channel already on the canonical grid."""
    values = np.linspace(0.0, 4.0, CANONICAL_GRID.shape[0])
    return SpectralDataset(CANONICAL_GRID, values)


def make_weighting(values_by_wavelength, name="luminance") -> WeightingFunction:
    """Build a weighting function on the canonical grid from a sparse mapping."""
    weights = np.zeros(CANONICAL_GRID.shape[0])
    for wavelength, value in values_by_wavelength.items():
        weights[int(wavelength) - int(CANONICAL_GRID[0])] = value
    return WeightingFunction(name=name, weights=weights, grid_min=int(CANONICAL_GRID[0]))


@pytest.fixture
def weighting_factory():
    return make_weighting
