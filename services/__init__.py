"""
Services package for SPD Lab.

This package provides the calculation core and the services around it:

Core Services:
- weighting: Embedded weighting tables on the canonical grid
- conversion: Raw sample to W/(m² nm) unit conversion
- interpolation: Resampling of measured rows onto the canonical grid
- calculations: Weighted integration, calculation requests and formatting

Supporting Services:
- importing: CSV import with per-row problem reporting
- exporting: Calculation and spectrum tables, CSV downloads
- visualization: Plotly charts
- app_operations: Workflow glue used by the Streamlit views (imported directly)

The core modules do not import Streamlit; only app_operations and the views
depend on the UI layer.
"""
# Import weighting services
from services.weighting import (
    WeightingTables,
    load_weighting_tables,
    get_weighting_tables,
    lookup
)

# Import conversion services
from services.conversion import (
    convert,
    convert_dataset,
    factors_for_units,
    validate_conversion_factors
)

# Import interpolation services
from services.interpolation import interpolate

# Import calculation services
from services.calculations import (
    # Calculation functions
    aggregate,
    calculate_quantity,
    compute_totals,
    run_calculation,

    # Formatting functions
    as_decimal,
    as_exponential,
    format_totals,
    sample_labels
)

# Import importing services
from services.importing import (
    RowError,
    ImportResult,
    parse_spectrum_csv
)

# Import exporting services
from services.exporting import (
    build_calculation_table,
    build_spectrum_table,
    build_downloads
)

# Import plotting services
from services.visualization import (
    create_spectrum_figure,
    create_weighting_figure
)
