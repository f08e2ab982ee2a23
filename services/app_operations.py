"""
High-level application operations for SPD Lab.

This module orchestrates the application workflow by coordinating between
the import, calculation and export services.

Key Functions:
- initialize_application_data(): Loads the weighting tables once per process
- import_spectrum(): Reads an uploaded file into rows plus row problems
- calculate_spectrum(): Runs one calculation request and prepares downloads

Errors from the calculation core are not caught here; the views decide how
to present them.
"""
# Standard library imports
import logging
from typing import Any, Dict, Optional

# Local imports
from models.core import SpectralDataset
from services.calculations import run_calculation
from services.conversion import factors_for_units
from services.exporting import build_downloads
from services.importing import ImportResult, parse_spectrum_csv
from services.weighting import WeightingTables, get_weighting_tables
from views.ui_utils import handle_error, try_operation

logger = logging.getLogger(__name__)


def initialize_application_data() -> Optional[Dict[str, Any]]:
    """
    Initialize and validate the application's reference data.

    Returns:
        Dictionary with key 'weighting_tables', or None if the embedded
        tables could not be loaded
    """
    tables = try_operation(
        get_weighting_tables,
        "Failed to load weighting tables"
    )

    if tables is None:
        handle_error("❌ Weighting tables are missing or damaged. Check models/data/weighting.", stop_execution=True)
        return None

    return {'weighting_tables': tables}


def import_spectrum(uploaded_file) -> ImportResult:
    """
    Import an uploaded spectrum file.

    Raises:
        ValueError: If the file is empty or cannot be tokenised
    """
    name = getattr(uploaded_file, "name", "upload")
    logger.info(f"Importing spectrum from {name}")
    return parse_spectrum_csv(uploaded_file)


def calculate_spectrum(
    dataset: SpectralDataset,
    area_unit: str,
    power_unit: str,
    tables: Optional[WeightingTables] = None,
    source_name: str = ""
) -> Dict[str, Any]:
    """
    Run a calculation request for the selected units.

    Args:
        dataset: Imported rows, sorted by wavelength
        area_unit: Key of AREA_UNITS chosen by the user
        power_unit: Key of POWER_UNITS chosen by the user
        tables: Weighting tables (defaults to the shared ones)
        source_name: Uploaded file name, used for download file names

    Returns:
        Dictionary with 'result' (CalculationResult) and 'downloads'

    Raises:
        CalculationError: Propagated unchanged from the calculation core
    """
    factors = factors_for_units(area_unit, power_unit)
    result = run_calculation(dataset, factors, tables=tables)
    return {
        'result': result,
        'downloads': build_downloads(result, source_name),
    }
