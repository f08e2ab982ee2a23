"""
Sidebar UI components for SPD Lab.

This module provides the sidebar controls: the spectrum uploader and the
unit selectors that define a calculation request.
"""
# Third-party imports
import streamlit as st
from typing import Any, Dict

# Local imports
from models.constants import (
    AREA_UNITS, DEFAULT_AREA_UNIT, DEFAULT_POWER_UNIT, POWER_UNITS,
    UI_HELP_TEXT, UI_LABELS, UI_SECTIONS
)
from services.conversion import unit_label


def spectrum_upload() -> Any:
    """
    UI component for uploading a measured spectrum.

    Returns:
        Streamlit UploadedFile, or None when nothing is uploaded
    """
    st.sidebar.header(UI_SECTIONS['upload'])
    return st.sidebar.file_uploader(
        UI_LABELS['upload_csv'],
        type=["csv", "txt", "tsv"],
        key="spectrum_file"
    )


def unit_selection() -> Dict[str, str]:
    """
    UI component for the measurement units.

    Returns:
        Dictionary with 'area_unit' and 'power_unit'
    """
    st.sidebar.header(UI_SECTIONS['units'])

    area_options = list(AREA_UNITS)
    power_options = list(POWER_UNITS)

    area_unit = st.sidebar.selectbox(
        UI_LABELS['area_unit'],
        options=area_options,
        index=area_options.index(DEFAULT_AREA_UNIT),
        help=UI_HELP_TEXT['area_unit'],
        key="area_unit"
    )
    power_unit = st.sidebar.selectbox(
        UI_LABELS['power_unit'],
        options=power_options,
        index=power_options.index(DEFAULT_POWER_UNIT),
        help=UI_HELP_TEXT['power_unit'],
        key="power_unit"
    )

    input_unit, output_unit = unit_label(area_unit, power_unit)
    st.sidebar.caption(f"{input_unit} → {output_unit}")

    return {'area_unit': area_unit, 'power_unit': power_unit}


def render_sidebar() -> Dict[str, Any]:
    """
    Render all sidebar controls.

    Returns:
        Dictionary with 'uploaded_file', 'area_unit', 'power_unit' and
        'show_weighting'
    """
    uploaded_file = spectrum_upload()
    units = unit_selection()
    show_weighting = st.sidebar.checkbox(UI_LABELS['show_weighting'], key="show_weighting")

    return {'uploaded_file': uploaded_file, 'show_weighting': show_weighting, **units}
