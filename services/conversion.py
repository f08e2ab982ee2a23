"""
Unit conversion for SPD Lab.

Maps raw sample values to calibrated spectral irradiance in W/(m² nm):

    calibrated = raw / power_scale * area_scale

The scalar ``convert`` is pure and unchecked. Request-level conversion goes
through ``convert_dataset``, which validates the factors first.
"""
import logging
import math
from typing import Tuple

from models.constants import AREA_UNITS, POWER_UNITS
from models.core import ConversionFactors, SpectralDataset
from models.errors import ConfigurationError

logger = logging.getLogger(__name__)


def convert(wavelength: float, raw_sample: float, area_scale: float, power_scale: float) -> float:
    """
    Convert one raw sample to spectral irradiance.

    The wavelength is accepted for interface symmetry with per-wavelength
    calibrations; the current conversion does not depend on it.
    """
    return raw_sample / power_scale * area_scale


def validate_conversion_factors(area_scale: float, power_scale: float) -> None:
    """
    Check both scale factors are finite and non-zero.

    Raises:
        ConfigurationError: If either factor is zero, NaN or infinite
    """
    for label, value in (("Power", power_scale), ("Area", area_scale)):
        try:
            numeric = float(value)
        except (TypeError, ValueError):
            raise ConfigurationError(f"{label} scale must be a number (got {value!r}).") from None
        if not math.isfinite(numeric):
            raise ConfigurationError(f"{label} scale must be finite (got {value}).")
        if numeric == 0:
            raise ConfigurationError(f"{label} scale cannot be zero.")


def factors_for_units(area_unit: str, power_unit: str) -> ConversionFactors:
    """
    Look up the conversion factors for a unit selection.

    Raises:
        ConfigurationError: If a unit is not one of the offered choices
    """
    if area_unit not in AREA_UNITS:
        raise ConfigurationError(f"Unknown area unit '{area_unit}'. Expected one of: {', '.join(AREA_UNITS)}")
    if power_unit not in POWER_UNITS:
        raise ConfigurationError(f"Unknown power unit '{power_unit}'. Expected one of: {', '.join(POWER_UNITS)}")
    return ConversionFactors(area_scale=AREA_UNITS[area_unit], power_scale=POWER_UNITS[power_unit])


def unit_label(area_unit: str, power_unit: str) -> Tuple[str, str]:
    """Return (input unit, output unit) strings for display."""
    return f"{power_unit}/({area_unit} nm)", "W/(m² nm)"


def convert_dataset(dataset: SpectralDataset, factors: ConversionFactors) -> SpectralDataset:
    """
    Convert every sample of every row.

    Args:
        dataset: Raw measurements
        factors: Area and power scale for this request

    Returns:
        New dataset with the same wavelengths and calibrated samples

    Raises:
        ConfigurationError: If the factors are zero or not finite
    """
    validate_conversion_factors(factors.area_scale, factors.power_scale)

    samples = convert(dataset.wavelengths[:, None], dataset.samples,
                      float(factors.area_scale), float(factors.power_scale))
    logger.debug(f"Converted {len(dataset)} rows x {dataset.channel_count} channels "
                 f"(area scale {factors.area_scale}, power scale {factors.power_scale})")
    return SpectralDataset(dataset.wavelengths, samples)
