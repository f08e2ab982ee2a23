"""
Spectrum importing utilities for SPD Lab.

This module turns an uploaded CSV file into a SpectralDataset plus a list of
per-line problems, so the UI can show what was skipped and why.

Expected layout:
- First column: wavelength in nm
- Remaining columns: one measured value per sample channel
- Optional header row (skipped when its first cell is not a number)

Key Features:
- Separator detection (semicolon, tab or comma)
- Decimal commas accepted in semicolon and tab separated files
- Per-line validation with 1-based line numbers
- Rows sorted by wavelength before they reach the calculation core
"""

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, NamedTuple, Optional, Tuple, Union

import numpy as np
import pandas as pd

from models.constants import IMPORT_WAVELENGTH_RANGE
from models.core import SpectralDataset

# Configure logging for debugging import issues
logger = logging.getLogger(__name__)

# Separators in detection priority order
SEPARATORS = (";", "\t", ",")


class RowError(NamedTuple):
    """A problem found on one line of an imported file."""
    row: int
    message: str


@dataclass
class ImportResult:
    """
    Outcome of importing a spectrum file.

    Attributes:
        dataset: Valid rows sorted by wavelength (possibly empty)
        errors: Problems found, one entry per rejected line
    """
    dataset: SpectralDataset
    errors: List[RowError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def channel_count(self) -> int:
        return self.dataset.channel_count


# ============================================================================
# COMMON UTILITIES
# ============================================================================

def safe_float(val, decimal_comma: bool = False) -> float:
    """Convert a value to float safely, returning NaN when it is not a number."""
    if val is None or (isinstance(val, float) and np.isnan(val)):
        return np.nan
    text = str(val).strip()
    if decimal_comma:
        text = text.replace(',', '.')
    try:
        return float(text)
    except ValueError:
        return np.nan


def read_text(file) -> str:
    """Read an uploaded file, a path or a text/bytes buffer into a string."""
    if isinstance(file, (str, Path)):
        return Path(file).read_text(encoding="utf-8-sig")

    if hasattr(file, "seek"):
        file.seek(0)
    content = file.read()
    if isinstance(content, bytes):
        content = content.decode("utf-8-sig")
    return content


def detect_separator(text: str) -> str:
    """Pick the separator used by the first non-blank line."""
    first_line = next((line for line in text.splitlines() if line.strip()), "")
    for separator in SEPARATORS:
        if separator in first_line:
            return separator
    return ","


def read_raw_table(text: str, separator: str) -> pd.DataFrame:
    """
    Parse text into a string DataFrame, one DataFrame row per file line.

    Lines may have different numbers of fields; short lines are padded with NaN.
    """
    width = max(line.count(separator) + 1 for line in text.splitlines())
    try:
        return pd.read_csv(
            io.StringIO(text), sep=separator, header=None, names=list(range(width)),
            dtype=str, skip_blank_lines=False, engine="python"
        )
    except pd.errors.ParserError as e:
        raise ValueError(f"CSV parsing error: {str(e)}")


def _trim_trailing_blanks(cells: List) -> List:
    while cells and (cells[-1] is None or (isinstance(cells[-1], float) and np.isnan(cells[-1]))
                     or str(cells[-1]).strip() == ""):
        cells.pop()
    return cells


# ============================================================================
# ROW VALIDATION
# ============================================================================

def parse_row(cells: List, line: int, decimal_comma: bool,
              expected_samples: Optional[int]) -> Tuple[Optional[Tuple[float, List[float]]], Optional[RowError]]:
    """
    Validate one line of the file.

    Returns:
        ((wavelength, samples), None) for a valid line, otherwise (None, RowError)
    """
    wavelength = safe_float(cells[0], decimal_comma)
    if np.isnan(wavelength):
        return None, RowError(line, f"Wavelength '{cells[0]}' is not a number.")

    low, high = IMPORT_WAVELENGTH_RANGE
    if not np.isfinite(wavelength) or wavelength < low or wavelength > high:
        return None, RowError(line, f"Wavelength {wavelength:g} nm is outside {low:g}-{high:g} nm.")

    raw_samples = cells[1:]
    if not raw_samples:
        return None, RowError(line, "Row has no sample values.")

    samples = []
    for index, cell in enumerate(raw_samples):
        value = safe_float(cell, decimal_comma)
        if np.isnan(value) or not np.isfinite(value):
            shown = "" if cell is None or (isinstance(cell, float) and np.isnan(cell)) else cell
            return None, RowError(line, f"Sample {index} ('{shown}') is not a number.")
        samples.append(value)

    if expected_samples is not None and len(samples) != expected_samples:
        return None, RowError(line, f"Expected {expected_samples} samples but found {len(samples)}.")

    return (wavelength, samples), None


# ============================================================================
# SPECTRUM IMPORT
# ============================================================================

def parse_spectrum_csv(file: Union[str, Path, io.IOBase]) -> ImportResult:
    """
    Import a measured spectrum from a CSV file.

    Args:
        file: Uploaded file object, text/bytes buffer or path

    Returns:
        ImportResult with the valid rows (sorted by wavelength) and the
        problems found on every rejected line

    Raises:
        ValueError: If the file is empty or cannot be tokenised at all
    """
    text = read_text(file)
    if not text.strip():
        raise ValueError("CSV file is empty.")

    separator = detect_separator(text)
    decimal_comma = separator != ","
    raw = read_raw_table(text, separator)

    rows: List[Tuple[float, List[float]]] = []
    errors: List[RowError] = []
    has_header = False
    seen = {}
    expected_samples = None

    for index, record in enumerate(raw.itertuples(index=False, name=None)):
        line = index + 1
        cells = _trim_trailing_blanks(list(record))
        if not cells:
            continue

        if not has_header and not rows and not errors and np.isnan(safe_float(cells[0], decimal_comma)):
            has_header = True
            continue

        parsed, error = parse_row(cells, line, decimal_comma, expected_samples)
        if error is not None:
            errors.append(error)
            continue

        wavelength, samples = parsed
        if wavelength in seen:
            errors.append(RowError(line, f"Duplicate wavelength {wavelength:g} nm (first seen on line {seen[wavelength]})."))
            continue

        seen[wavelength] = line
        expected_samples = len(samples)
        rows.append((wavelength, samples))

    rows.sort(key=lambda r: r[0])
    dataset = SpectralDataset.from_rows(rows)

    if errors:
        logger.warning(f"Imported {len(rows)} rows with {len(errors)} rejected line(s)")
    else:
        logger.info(f"Imported {len(rows)} rows with {dataset.channel_count} sample channel(s)")

    return ImportResult(dataset=dataset, errors=errors)
