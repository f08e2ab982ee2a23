"""
Model package for SPD Lab.

Exports all data models used in the application.
"""

# Import constants directly from constants module
from models.constants import CANONICAL_GRID

from models.core import (
    # Quantities
    Quantity,
    WEIGHTING_NAMES,

    # Spectral data
    SampleRow,
    SpectralDataset,
    ConversionFactors,
    WeightingFunction,
    CalculationResult
)

from models.errors import (
    CalculationError,
    ConfigurationError,
    InsufficientDataError,
    ContractViolationError
)
