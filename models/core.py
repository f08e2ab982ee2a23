"""
Core data models for SPD Lab.

This module defines all fundamental data structures used throughout the application:

Data Models:
- Quantity: Closed set of the six weighted quantities computed per request
- SampleRow: One tabulated wavelength with a value per measurement channel
- SpectralDataset: Column-oriented container of sample rows
- ConversionFactors: Area and power scale chosen for a calculation request
- WeightingFunction: Immutable spectral weighting table on the canonical grid
- CalculationResult: Totals plus converted and interpolated rows of one request

Design Principles:
- Uses dataclasses for clean, type-safe data structures
- Leverages NumPy for efficient numerical operations
- Reference data and results are never mutated after construction
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, NamedTuple, Optional, Sequence

import numpy as np

from models.constants import MAX_LUMINOUS_EFFICACY, WATTS_TO_MILLIWATTS
from models.errors import ContractViolationError


class Quantity(Enum):
    """
    The six quantities computed for every calculation request.

    Each member's value is the name of the weighting table it integrates
    against. Iterating the enum yields them in table order.
    """
    LUMINANCE = "luminance"
    S_CONE = "sCone"
    M_CONE = "mCone"
    L_CONE = "lCone"
    ROD = "rod"
    MEL = "mel"

    @property
    def weighting_name(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Row label used in the calculation table."""
        return _QUANTITY_LABELS[self]

    @property
    def output_scale(self) -> float:
        """Factor turning a weighted W/m² sum into the reported unit."""
        if self is Quantity.LUMINANCE:
            return MAX_LUMINOUS_EFFICACY
        return WATTS_TO_MILLIWATTS


_QUANTITY_LABELS = {
    Quantity.LUMINANCE: "Illuminance [lux]",
    Quantity.S_CONE: "S-cone-opic irradiance (mW/m²)",
    Quantity.M_CONE: "M-cone-opic irradiance (mW/m²)",
    Quantity.L_CONE: "L-cone-opic irradiance (mW/m²)",
    Quantity.ROD: "Rhodopic irradiance (mW/m²)",
    Quantity.MEL: "Melanopic irradiance (mW/m²)",
}

WEIGHTING_NAMES = tuple(q.weighting_name for q in Quantity)


class SampleRow(NamedTuple):
    """A single tabulated wavelength and the value of every channel there."""
    wavelength: float
    samples: tuple


@dataclass(frozen=True)
class SpectralDataset:
    """
    Spectral measurements stored column-wise.

    Attributes:
        wavelengths: Wavelengths in nm, shape (n_rows,)
        samples: Channel values, shape (n_rows, n_channels)

    Row i of ``samples`` holds the value of every channel at ``wavelengths[i]``.
    Both arrays are read-only once the dataset is built.
    """
    wavelengths: np.ndarray
    samples: np.ndarray

    def __post_init__(self):
        wavelengths = np.array(self.wavelengths, dtype=float).reshape(-1)
        samples = np.array(self.samples, dtype=float)
        if samples.ndim == 1:
            samples = samples.reshape(len(wavelengths), -1) if len(wavelengths) else samples.reshape(0, 0)
        if samples.ndim != 2 or samples.shape[0] != wavelengths.shape[0]:
            raise ContractViolationError(
                f"Sample matrix shape {samples.shape} does not match {wavelengths.shape[0]} wavelengths"
            )
        wavelengths.flags.writeable = False
        samples.flags.writeable = False
        object.__setattr__(self, "wavelengths", wavelengths)
        object.__setattr__(self, "samples", samples)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence], channel_count: Optional[int] = None) -> "SpectralDataset":
        """
        Build a dataset from ``(wavelength, samples)`` pairs.

        Args:
            rows: Sequence of (wavelength, sequence of channel values)
            channel_count: Expected number of channels (defaults to the first row's)

        Raises:
            ContractViolationError: If any row has a different channel count
        """
        rows = list(rows)
        if not rows:
            return cls(np.empty(0), np.empty((0, channel_count or 0)))

        expected = channel_count if channel_count is not None else len(rows[0][1])
        for wavelength, samples in rows:
            if len(samples) != expected:
                raise ContractViolationError(
                    f"Row at {wavelength} nm has {len(samples)} samples, expected {expected}"
                )

        wavelengths = np.array([row[0] for row in rows], dtype=float)
        samples = np.array([list(row[1]) for row in rows], dtype=float).reshape(len(rows), expected)
        return cls(wavelengths, samples)

    @property
    def channel_count(self) -> int:
        return self.samples.shape[1]

    @property
    def is_empty(self) -> bool:
        return self.wavelengths.size == 0

    def __len__(self) -> int:
        return self.wavelengths.shape[0]

    def __iter__(self) -> Iterator[SampleRow]:
        for wavelength, samples in zip(self.wavelengths, self.samples):
            yield SampleRow(float(wavelength), tuple(float(v) for v in samples))


@dataclass(frozen=True)
class ConversionFactors:
    """
    Multiplicative unit conversion chosen for a calculation request.

    Samples are converted as ``sample / power_scale * area_scale``.
    """
    area_scale: float = 1.0
    power_scale: float = 1.0


@dataclass(frozen=True)
class WeightingFunction:
    """
    Spectral weighting function tabulated on the canonical grid.

    Attributes:
        name: Table name (one of WEIGHTING_NAMES)
        weights: Weight per canonical grid wavelength, zero outside the table's domain
        grid_min: Wavelength of ``weights[0]`` in nm
        description: Provenance text read from the data file
    """
    name: str
    weights: np.ndarray
    grid_min: int
    description: str = ""

    def __call__(self, wavelength: int) -> float:
        offset = int(wavelength) - self.grid_min
        if offset < 0 or offset >= self.weights.shape[0]:
            return 0.0
        return float(self.weights[offset])

    @property
    def wavelengths(self) -> np.ndarray:
        return np.arange(self.grid_min, self.grid_min + self.weights.shape[0])


@dataclass(frozen=True)
class CalculationResult:
    """
    Everything a calculation request hands back to the presentation layer.

    Attributes:
        totals: Channel totals for each quantity, in the quantity's output unit
        converted: Unit-converted rows as measured (spectrum view)
        interpolated: Converted rows resampled on the canonical grid (calculations, charts)
    """
    totals: Dict[Quantity, np.ndarray]
    converted: SpectralDataset
    interpolated: SpectralDataset

    @property
    def channel_count(self) -> int:
        return self.converted.channel_count
