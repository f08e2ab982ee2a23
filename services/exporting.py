"""
Table building and CSV export for SPD Lab.

Builds the two tables shown to the user and offered for download:
- Calculation table: one row per quantity, one column per sample channel
- Spectrum table: converted (non-interpolated) spectral irradiance per wavelength

Values are formatted here and only here; the calculation core always works
with unrounded floats.
"""
import re
from typing import Dict

import pandas as pd

from models.constants import (
    CONDITION_HEADER, SPECTRAL_IRRADIANCE_HEADER, WAVELENGTH_HEADER
)
from models.core import CalculationResult, SpectralDataset
from services.calculations import as_exponential, format_totals, sample_labels


def _wavelength_text(wavelength: float) -> str:
    return f"{wavelength:g}"


def build_calculation_table(result: CalculationResult) -> pd.DataFrame:
    """
    Build the calculation table.

    Returns:
        DataFrame with a "Condition" column followed by S0, S1, ... holding
        totals formatted with two decimals
    """
    labels = sample_labels(result.channel_count)
    records = [
        [condition] + values
        for condition, values in format_totals(result.totals).items()
    ]
    return pd.DataFrame(records, columns=[CONDITION_HEADER] + labels)


def build_spectrum_table(dataset: SpectralDataset) -> pd.DataFrame:
    """
    Build the spectrum table from converted rows.

    Returns:
        DataFrame with a wavelength column and one scientific-notation column per sample
    """
    labels = sample_labels(dataset.channel_count)
    records = [
        [_wavelength_text(row.wavelength)] + [as_exponential(v) for v in row.samples]
        for row in dataset
    ]
    return pd.DataFrame(records, columns=[WAVELENGTH_HEADER] + labels)


def spectrum_table_caption(channel_count: int) -> str:
    """Caption describing the spectrum table's sample columns."""
    noun = "sample" if channel_count == 1 else "samples"
    return f"{SPECTRAL_IRRADIANCE_HEADER}, {channel_count} {noun}"


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    """Serialize a table to UTF-8 CSV for download."""
    return df.to_csv(index=False).encode('utf-8')


def export_filename(base: str, source_name: str = "") -> str:
    """
    Build a download filename such as ``calculation_my_lamp.csv``.

    Characters that are invalid in filenames are dropped from the source name.
    """
    stem = re.sub(r'[<>:"/\\|?*]', "", source_name).strip()
    stem = re.sub(r'\.[A-Za-z0-9]+$', "", stem).replace(" ", "_")
    return f"{base}_{stem}.csv" if stem else f"{base}.csv"


def build_downloads(result: CalculationResult, source_name: str = "") -> Dict[str, Dict[str, object]]:
    """
    Prepare both CSV downloads.

    Returns:
        Dictionary with 'calculation' and 'spectrum' entries, each holding
        'bytes' and 'name' for a download button
    """
    return {
        'calculation': {
            'bytes': to_csv_bytes(build_calculation_table(result)),
            'name': export_filename("calculation", source_name),
        },
        'spectrum': {
            'bytes': to_csv_bytes(build_spectrum_table(result.converted)),
            'name': export_filename("spectrum", source_name),
        },
    }
