"""
Weighting table services for SPD Lab.

This module loads the six spectral weighting functions (photopic luminous
efficiency plus the five alpha-opic action spectra) from the embedded TSV
files and places them on the canonical wavelength grid.

Tables are parsed once per process and shared read-only by every
calculation request.
"""
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterator, NamedTuple, Optional, Tuple, Union

import numpy as np
import pandas as pd

from models.constants import (
    CANONICAL_GRID, WEIGHTING_DATA_DIR,
    WEIGHTING_WAVELENGTH_COL, WEIGHTING_VALUE_COL
)
from models.core import WeightingFunction, WEIGHTING_NAMES
from models.errors import ContractViolationError

logger = logging.getLogger(__name__)


class WeightingFileConfig(NamedTuple):
    """Configuration for weighting table file processing."""
    wavelength_col: str = WEIGHTING_WAVELENGTH_COL
    value_col: str = WEIGHTING_VALUE_COL
    name_col: str = "Name"
    description_col: str = "Description"


class WeightingFileProcessor:
    """
    Parses a weighting table TSV and lays it out on the canonical grid.

    Files are tabulated at integer wavelengths with a 1 nm step. Wavelengths
    the file does not cover get a weight of zero.
    """

    def __init__(self, config: WeightingFileConfig = WeightingFileConfig(),
                 grid: np.ndarray = CANONICAL_GRID):
        self.config = config
        self.grid = grid

    def parse_file(self, path: Path) -> pd.DataFrame:
        """Read a TSV file and check the required columns are present."""
        df = pd.read_csv(path, sep="\t")
        df.columns = [str(c).strip() for c in df.columns]

        missing = [c for c in (self.config.wavelength_col, self.config.value_col) if c not in df.columns]
        if missing:
            raise ValueError(f"{path.name} is missing column(s): {', '.join(missing)}")

        return df.dropna(subset=[self.config.wavelength_col, self.config.value_col])

    def extract_metadata(self, df: pd.DataFrame, path: Path) -> Tuple[str, str]:
        """Return (name, description), falling back to the file stem for the name."""
        name, description = path.stem, ""
        if self.config.name_col in df.columns:
            values = df[self.config.name_col].dropna()
            if len(values) > 0 and str(values.iloc[0]).strip():
                name = str(values.iloc[0]).strip()
        if self.config.description_col in df.columns:
            values = df[self.config.description_col].dropna()
            if len(values) > 0:
                description = str(values.iloc[0]).strip()
        return name, description

    def to_grid(self, wavelengths: np.ndarray, values: np.ndarray, source: str) -> np.ndarray:
        """Place tabulated weights on the grid, zero outside their domain."""
        if not np.allclose(wavelengths, np.round(wavelengths)):
            raise ValueError(f"{source}: weighting tables must be tabulated at integer wavelengths")
        if np.any(values < 0):
            raise ValueError(f"{source}: weights cannot be negative (min: {values.min():.3g})")

        weights = np.zeros(self.grid.shape[0], dtype=float)
        offsets = np.round(wavelengths).astype(int) - int(self.grid[0])
        inside = (offsets >= 0) & (offsets < weights.shape[0])
        weights[offsets[inside]] = values[inside]
        return weights

    def process(self, path: Path) -> WeightingFunction:
        """
        Process a weighting table file.

        Args:
            path: Path to the TSV file

        Returns:
            WeightingFunction with read-only weights on the canonical grid
        """
        df = self.parse_file(path)
        name, description = self.extract_metadata(df, path)

        wavelengths = df[self.config.wavelength_col].astype(float).values
        values = df[self.config.value_col].astype(float).values
        weights = self.to_grid(wavelengths, values, path.name)
        weights.flags.writeable = False

        logger.debug(f"Loaded weighting table '{name}' from {path.name} "
                     f"({int(wavelengths.min())}-{int(wavelengths.max())} nm)")
        return WeightingFunction(name=name, weights=weights,
                                 grid_min=int(self.grid[0]), description=description)


class WeightingTables:
    """
    The complete, immutable set of weighting functions.

    Lookups are O(1): each function is an array indexed by the wavelength's
    offset from the start of the canonical grid.
    """

    def __init__(self, functions: Dict[str, WeightingFunction]):
        missing = [name for name in WEIGHTING_NAMES if name not in functions]
        if missing:
            raise ContractViolationError(f"Missing weighting table(s): {', '.join(missing)}")
        self._functions = {name: functions[name] for name in WEIGHTING_NAMES}

    def __getitem__(self, name: str) -> WeightingFunction:
        try:
            return self._functions[name]
        except KeyError:
            raise ContractViolationError(
                f"Unknown weighting function '{name}'. Expected one of: {', '.join(WEIGHTING_NAMES)}"
            ) from None

    def __iter__(self) -> Iterator[WeightingFunction]:
        return iter(self._functions.values())

    def __len__(self) -> int:
        return len(self._functions)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._functions)

    def lookup(self, name: str, wavelength: int) -> float:
        """Weight of function ``name`` at an integer wavelength (0 outside its domain)."""
        return self[name](wavelength)


def load_weighting_tables(directory: Union[str, Path] = WEIGHTING_DATA_DIR,
                          processor: Optional[WeightingFileProcessor] = None) -> WeightingTables:
    """
    Load every weighting table TSV in ``directory``.

    Raises:
        ContractViolationError: If a required table is absent
        ValueError: If a table file is malformed
    """
    processor = processor or WeightingFileProcessor()
    data_dir = Path(directory)

    functions = {}
    for path in sorted(data_dir.glob("*.tsv")):
        function = processor.process(path)
        functions[function.name] = function

    logger.info(f"Loaded {len(functions)} weighting tables from {data_dir}")
    return WeightingTables(functions)


@lru_cache(maxsize=None)
def get_weighting_tables() -> WeightingTables:
    """Process-wide weighting tables, loaded on first use."""
    return load_weighting_tables()


def lookup(name: str, wavelength: int) -> float:
    """Weight of the named function at ``wavelength`` using the shared tables."""
    return get_weighting_tables().lookup(name, wavelength)
