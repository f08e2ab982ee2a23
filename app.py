"""
SPD Lab - Spectral Power Distribution Calculator

A Streamlit application that turns measured spectral power distributions into
illuminance and alpha-opic irradiances. It lets lighting designers and
researchers:

- Upload a spectrum with one or more sample columns
- Pick the area and power units the measurement was recorded in
- Read illuminance (lux) and S-cone, M-cone, L-cone, rhodopic and melanopic
  irradiance (mW/m²) for every sample
- Inspect the converted spectrum as a table and an interactive chart
- Download both tables as CSV

Usage:
    Run with: streamlit run app.py
"""

import streamlit as st

from models.constants import UI_INFO_MESSAGES, UI_SECTIONS

# Configure Streamlit
st.set_page_config(page_title=UI_SECTIONS['title'], layout="wide")

# Import main application components
from services.app_operations import (
    calculate_spectrum, import_spectrum, initialize_application_data
)
from views.main_content import render_main_content
from views.sidebar import render_sidebar
from views.ui_utils import show_info_message, try_operation


def main():
    """
    Main application entry point.

    1. Load the weighting tables
    2. Render the sidebar (upload and unit selection)
    3. Import the uploaded spectrum and run the calculation
    4. Display tables, charts and downloads

    Failures are reported in the page; a bad upload never stops the app.
    """
    st.title(UI_SECTIONS['title'])

    # 1. Initialize reference data
    data = initialize_application_data()
    if not data:
        return
    tables = data['weighting_tables']

    # 2. Render sidebar
    controls = render_sidebar()
    uploaded_file = controls['uploaded_file']

    if uploaded_file is None:
        show_info_message(UI_INFO_MESSAGES['no_file'])
        render_main_content(None, None, tables, controls['show_weighting'])
        return

    # 3. Import and calculate
    import_result = try_operation(
        lambda: import_spectrum(uploaded_file),
        "Could not read the uploaded file"
    )
    if import_result is None:
        return

    calculation = None
    if import_result.dataset.is_empty:
        show_info_message(UI_INFO_MESSAGES['no_valid_rows'])
    else:
        calculation = try_operation(
            lambda: calculate_spectrum(
                import_result.dataset,
                controls['area_unit'],
                controls['power_unit'],
                tables=tables,
                source_name=uploaded_file.name
            ),
            "Calculation failed"
        )

    # 4. Render main content
    render_main_content(calculation, import_result, tables, controls['show_weighting'])


if __name__ == "__main__":
    main()
