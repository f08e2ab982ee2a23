"""
Mathematical calculations for SPD Lab.

This module provides all mathematical computation functions for:
- Weighted integration of spectra against the weighting tables
- Illuminance and alpha-opic irradiance totals per channel
- The full calculation request (convert, interpolate, aggregate)
- Formatting of totals and spectral values for display and export
"""
# Standard library imports
import logging
from typing import Dict, List, Optional, Sequence, Union

# Third-party imports
import numpy as np

# Local imports
from models.constants import SAMPLE_LABEL_PREFIX, SPECTRUM_DIGITS, TOTAL_DECIMALS
from models.core import (
    CalculationResult, ConversionFactors, Quantity, SpectralDataset, WeightingFunction
)
from models.errors import ContractViolationError
from services.conversion import convert_dataset
from services.interpolation import interpolate
from services.weighting import WeightingTables, get_weighting_tables

logger = logging.getLogger(__name__)


# ============================================================================
# AGGREGATION
# ============================================================================

def _weights_for(wavelengths: np.ndarray, weighting_function: WeightingFunction) -> np.ndarray:
    """Weight at each row wavelength, zero outside the function's domain."""
    rounded = np.round(wavelengths)
    if not np.allclose(wavelengths, rounded):
        raise ContractViolationError("Aggregation requires rows on an integer wavelength grid")

    offsets = rounded.astype(int) - weighting_function.grid_min
    inside = (offsets >= 0) & (offsets < weighting_function.weights.shape[0])

    weights = np.zeros(wavelengths.shape[0], dtype=float)
    weights[inside] = weighting_function.weights[offsets[inside]]
    return weights


def aggregate(
    interpolated_rows: Union[SpectralDataset, Sequence],
    channel_count: int,
    weighting_function: WeightingFunction
) -> np.ndarray:
    """
    Integrate interpolated spectra against a weighting function.

    Each grid row counts as a 1 nm wide rectangle, so the total for a channel is
    the plain sum of weight(wavelength) * sample over all rows.

    Args:
        interpolated_rows: Rows on an integer 1 nm grid
        channel_count: Number of channels per row
        weighting_function: Weighting table to integrate against

    Returns:
        Array of shape (channel_count,) with one float64 total per channel
    """
    if isinstance(interpolated_rows, SpectralDataset):
        dataset = interpolated_rows
    else:
        dataset = SpectralDataset.from_rows(interpolated_rows, channel_count)

    if not dataset.is_empty and dataset.channel_count != channel_count:
        raise ContractViolationError(
            f"Rows carry {dataset.channel_count} samples but {channel_count} channels were requested"
        )
    if dataset.is_empty:
        return np.zeros(channel_count, dtype=float)

    weights = _weights_for(dataset.wavelengths, weighting_function)
    return np.sum(weights[:, None] * dataset.samples, axis=0, dtype=np.float64)


def calculate_quantity(
    interpolated_rows: Union[SpectralDataset, Sequence],
    channel_count: int,
    quantity: Quantity,
    tables: Optional[WeightingTables] = None
) -> np.ndarray:
    """
    Totals of one quantity in its reporting unit (lux or mW/m²).

    Args:
        interpolated_rows: Rows on the canonical grid, in W/(m² nm)
        channel_count: Number of channels per row
        quantity: Which weighted quantity to compute
        tables: Weighting tables (defaults to the shared process-wide tables)
    """
    tables = tables or get_weighting_tables()
    weighting_function = tables[quantity.weighting_name]
    return aggregate(interpolated_rows, channel_count, weighting_function) * quantity.output_scale


def compute_totals(
    interpolated_rows: Union[SpectralDataset, Sequence],
    channel_count: int,
    tables: Optional[WeightingTables] = None
) -> Dict[Quantity, np.ndarray]:
    """
    Compute all six quantities for every channel.

    Returns:
        Dictionary mapping every Quantity member to its per-channel totals
    """
    tables = tables or get_weighting_tables()
    return {
        quantity: calculate_quantity(interpolated_rows, channel_count, quantity, tables)
        for quantity in Quantity
    }


# ============================================================================
# CALCULATION REQUEST
# ============================================================================

def run_calculation(
    dataset: SpectralDataset,
    factors: ConversionFactors,
    channel_count: Optional[int] = None,
    tables: Optional[WeightingTables] = None
) -> CalculationResult:
    """
    Run a full calculation request.

    Steps:
    1. Convert raw samples with the requested area and power scale
    2. Interpolate the converted rows onto the canonical grid
    3. Integrate against all six weighting tables

    Args:
        dataset: Raw measurements sorted by wavelength
        factors: Unit conversion factors for this request
        channel_count: Expected channel count (defaults to the dataset's)
        tables: Weighting tables (defaults to the shared process-wide tables)

    Returns:
        CalculationResult with totals, converted rows and interpolated rows

    Raises:
        ConfigurationError: If a scale factor is zero or not finite
        InsufficientDataError: If the dataset has no rows
        ContractViolationError: On channel count mismatches or unsorted rows

    Either every total is produced or an exception is raised; there are no
    partial results.
    """
    if channel_count is None:
        channel_count = dataset.channel_count

    converted = convert_dataset(dataset, factors)
    interpolated = interpolate(converted, channel_count)
    totals = compute_totals(interpolated, channel_count, tables)

    logger.info(f"Calculated {len(totals)} quantities for {channel_count} channel(s) "
                f"from {len(dataset)} rows")
    return CalculationResult(totals=totals, converted=converted, interpolated=interpolated)


# ============================================================================
# FORMATTING FUNCTIONS
# ============================================================================

def as_decimal(value: float) -> str:
    """Format a total with two decimals, e.g. ``123.46``."""
    return f"{value:.{TOTAL_DECIMALS}f}"


def as_exponential(value: float) -> str:
    """Format a spectral value in scientific notation, e.g. ``1.36e+02``."""
    return f"{value:.{SPECTRUM_DIGITS}e}"


def sample_labels(channel_count: int) -> List[str]:
    """Column labels S0, S1, ... for each channel."""
    return [f"{SAMPLE_LABEL_PREFIX}{i}" for i in range(channel_count)]


def format_totals(totals: Dict[Quantity, np.ndarray]) -> Dict[str, List[str]]:
    """
    Format totals for display.

    Returns:
        Dictionary mapping quantity labels to formatted per-channel values,
        in Quantity order
    """
    return {
        quantity.label: [as_decimal(v) for v in totals[quantity]]
        for quantity in Quantity
    }
