# models/constants.py
"""
Application constants and configuration values for SPD Lab.

This module centralizes all constant values used throughout the application:
- Spectral data configuration (canonical wavelength grid, weighting tables)
- Photometric constants and quantity labels
- Unit conversion choices offered to the user
- User interface text and styling constants
- Chart rendering configuration

Constants defined here ensure consistency across all modules and provide
a single location for configuration changes.
"""

# Standard library imports
from pathlib import Path

# Third-party imports
import numpy as np

# =============================================================================
# SPECTRAL DATA CONFIGURATION
# =============================================================================

# Canonical wavelength grid shared by all weighting functions and interpolated spectra
GRID_MIN_NM = 380
GRID_MAX_NM = 780
CANONICAL_GRID = np.arange(GRID_MIN_NM, GRID_MAX_NM + 1, 1)  # 380–780 nm, step 1 nm
CANONICAL_GRID.flags.writeable = False

# Embedded weighting function tables (one TSV per function)
WEIGHTING_DATA_DIR = Path(__file__).resolve().parent / "data" / "weighting"

# Column layout of the weighting TSV files
WEIGHTING_WAVELENGTH_COL = "Wavelength"
WEIGHTING_VALUE_COL = "Weight"

# Plausible wavelength range for imported measurements
IMPORT_WAVELENGTH_RANGE = (200.0, 2000.0)

# =============================================================================
# PHOTOMETRIC CONSTANTS
# =============================================================================

MAX_LUMINOUS_EFFICACY = 683.002  # K_m, lm/W
WATTS_TO_MILLIWATTS = 1000.0     # alpha-opic irradiances are reported in mW/m²

# =============================================================================
# UNIT CONVERSION CHOICES
# =============================================================================

# Samples are divided by the power scale and multiplied by the area scale,
# so a reading per (mW, cm²) ends up in W/m².
AREA_UNITS = {
    "m²": 1.0,
    "cm²": 10_000.0,
    "mm²": 1_000_000.0,
}

POWER_UNITS = {
    "W": 1.0,
    "mW": 1_000.0,
    "µW": 1_000_000.0,
}

DEFAULT_AREA_UNIT = "m²"
DEFAULT_POWER_UNIT = "W"

# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

TOTAL_DECIMALS = 2      # Calculation table precision
SPECTRUM_DIGITS = 2     # Digits after the point in scientific notation

# Column headers used by the exported tables
CONDITION_HEADER = "Condition"
WAVELENGTH_HEADER = "Wavelength [nm]"
SPECTRAL_IRRADIANCE_HEADER = "Spectral irradiance [W/(m² nm)]"
SAMPLE_LABEL_PREFIX = "S"

# =============================================================================
# USER INTERFACE TEXT CONSTANTS
# =============================================================================

UI_SECTIONS = {
    'title': "SPD Lab",
    'upload': "Spectrum Upload",
    'units': "Measurement Units",
    'calculation': "Calculation",
    'spectrum': "Spectrum",
    'chart': "Interpolated Spectrum",
    'weighting_chart': "Weighting Functions",
    'downloads': "Downloads",
}

UI_LABELS = {
    'upload_csv': "Upload CSV (Wavelength, Sample 1, Sample 2, ...)",
    'area_unit': "Area unit",
    'power_unit': "Power unit",
    'show_weighting': "Show weighting functions",
}

UI_BUTTONS = {
    'download_calculation': "⬇️ Download calculation CSV",
    'download_spectrum': "⬇️ Download spectrum CSV",
}

UI_INFO_MESSAGES = {
    'no_file': "ℹ️ Upload a spectral power distribution to start.",
    'no_valid_rows': "ℹ️ The uploaded file contains no usable rows.",
}

UI_WARNING_MESSAGES = {
    'row_errors': "We had some problems understanding that file:",
}

# Headline shown above core errors, keyed by CalculationError.kind
UI_ERROR_TITLES = {
    'configuration': "Invalid unit selection",
    'insufficient_data': "Not enough data",
    'contract_violation': "Internal error",
    'calculation': "Calculation failed",
}

ERROR_TABLE_COLUMNS = ("Row", "Problem")

UI_HELP_TEXT = {
    'area_unit': "Area unit the measurement was recorded in",
    'power_unit': "Power unit the measurement was recorded in",
}

# =============================================================================
# CHART RENDERING AND VISUALIZATION CONSTANTS
# =============================================================================

CHART_HEIGHTS = {
    'default': 300,
    'standard_plot': 400,
}

CHART_LINE_STYLES = {
    'default': {'width': 2},
    'weighting': {'width': 1.5},
}

# Qualitative palette cycled across sample channels
CHANNEL_COLORS = [
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
]

WEIGHTING_COLORS = {
    'luminance': "#555555",
    'sCone': "#4b4bff",
    'mCone': "#2ca02c",
    'lCone': "#d62728",
    'rod': "#9467bd",
    'mel': "#17becf",
}
