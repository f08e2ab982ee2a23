"""
Interpolation of measured spectra onto the canonical wavelength grid.

Each channel is resampled independently with piecewise-linear interpolation.
Grid wavelengths outside the measured band take the value of the nearest
measured endpoint; nothing is extrapolated.
"""
import logging
from typing import Sequence, Union

import numpy as np

from models.constants import CANONICAL_GRID
from models.core import SpectralDataset
from models.errors import ContractViolationError, InsufficientDataError

logger = logging.getLogger(__name__)


def _as_dataset(rows: Union[SpectralDataset, Sequence], channel_count: int) -> SpectralDataset:
    if isinstance(rows, SpectralDataset):
        return rows
    return SpectralDataset.from_rows(rows, channel_count)


def interpolate(rows: Union[SpectralDataset, Sequence],
                channel_count: int,
                grid: np.ndarray = CANONICAL_GRID) -> SpectralDataset:
    """
    Resample rows onto the canonical grid, one output row per grid wavelength.

    Args:
        rows: SpectralDataset or sequence of (wavelength, samples), sorted ascending
        channel_count: Number of channels every row carries
        grid: Target wavelengths (defaults to the canonical 1 nm grid)

    Returns:
        SpectralDataset whose wavelengths are ``grid``

    Raises:
        InsufficientDataError: If there are no rows
        ContractViolationError: On a channel count mismatch or unsorted rows

    Duplicate wavelengths: rows repeating an already-seen wavelength are
    dropped before bracketing, so the first row's samples stand for that
    wavelength on both sides. The importer applies the same keep-first rule
    and reports the later line as a row error. For example
    ``[(500, [1]), (500, [9]), (600, [1])]`` gives 1.0 everywhere between 500 and 600 nm.
    """
    dataset = _as_dataset(rows, channel_count)
    if dataset.is_empty:
        raise InsufficientDataError("Cannot interpolate: no spectral rows were supplied.")
    if channel_count < 1:
        raise ContractViolationError(f"Channel count must be at least 1 (got {channel_count})")
    if dataset.channel_count != channel_count:
        raise ContractViolationError(
            f"Rows carry {dataset.channel_count} samples but {channel_count} channels were requested"
        )

    wavelengths = dataset.wavelengths
    steps = np.diff(wavelengths)
    if np.any(steps < 0):
        raise ContractViolationError("Rows must be sorted by ascending wavelength before interpolation")

    keep = np.concatenate(([True], steps > 0))
    wavelengths = wavelengths[keep]
    samples = dataset.samples[keep]

    values = np.empty((grid.shape[0], channel_count), dtype=float)
    for channel in range(channel_count):
        column = samples[:, channel]
        values[:, channel] = np.interp(grid, wavelengths, column, left=column[0], right=column[-1])

    logger.debug(f"Interpolated {len(dataset)} rows ({wavelengths[0]:g}-{wavelengths[-1]:g} nm) "
                 f"onto {grid.shape[0]} grid points for {channel_count} channel(s)")
    return SpectralDataset(grid, values)
