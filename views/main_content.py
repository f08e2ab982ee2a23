"""
Main content display components for SPD Lab.

This module consolidates the main content area: the import problem table,
the calculation and spectrum tables, charts and download buttons.
"""
import streamlit as st
from typing import Any, Dict, Optional

from models.constants import UI_BUTTONS, UI_SECTIONS, UI_WARNING_MESSAGES
from models.core import CalculationResult
from services.exporting import (
    build_calculation_table, build_spectrum_table, spectrum_table_caption
)
from services.importing import ImportResult
from services.visualization import create_spectrum_figure, create_weighting_figure
from services.weighting import WeightingTables
from views.ui_utils import row_errors_frame

# ============================================================================
# CHART RENDERING UTILITIES
# ============================================================================

def render_chart(
    fig: Any,
    title: Optional[str] = None,
    description: Optional[str] = None,
    use_container_width: bool = True
) -> None:
    """Render a chart with optional title and description."""
    if title:
        st.subheader(title)

    st.plotly_chart(fig, use_container_width=use_container_width)

    if description:
        st.markdown(description)


# ============================================================================
# RESULT DISPLAYS
# ============================================================================

def row_error_display(import_result: Optional[ImportResult]) -> None:
    """Show the lines of the uploaded file that were skipped."""
    if import_result is None or not import_result.has_errors:
        return
    st.warning(UI_WARNING_MESSAGES['row_errors'])
    st.dataframe(row_errors_frame(import_result.errors), hide_index=True, use_container_width=True)


def calculation_display(result: CalculationResult) -> None:
    """Show illuminance and alpha-opic irradiances per sample."""
    st.subheader(UI_SECTIONS['calculation'])
    st.dataframe(build_calculation_table(result), hide_index=True, use_container_width=True)


def spectrum_display(result: CalculationResult) -> None:
    """Show the converted spectrum as measured (not interpolated)."""
    st.subheader(UI_SECTIONS['spectrum'])
    st.caption(spectrum_table_caption(result.channel_count))
    st.dataframe(build_spectrum_table(result.converted), hide_index=True, use_container_width=True)


def download_buttons(downloads: Dict[str, Dict[str, Any]]) -> None:
    """Offer both tables as CSV downloads."""
    st.subheader(UI_SECTIONS['downloads'])
    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            label=UI_BUTTONS['download_calculation'],
            data=downloads['calculation']['bytes'],
            file_name=downloads['calculation']['name'],
            mime="text/csv"
        )
    with col2:
        st.download_button(
            label=UI_BUTTONS['download_spectrum'],
            data=downloads['spectrum']['bytes'],
            file_name=downloads['spectrum']['name'],
            mime="text/csv"
        )


def render_main_content(
    calculation: Optional[Dict[str, Any]],
    import_result: Optional[ImportResult],
    tables: WeightingTables,
    show_weighting: bool = False
) -> None:
    """
    Render the main content area.

    Args:
        calculation: Output of calculate_spectrum, or None when nothing was calculated
        import_result: Outcome of the upload, or None when nothing was uploaded
        tables: Weighting tables for the reference chart
        show_weighting: Whether to plot the weighting functions
    """
    row_error_display(import_result)

    if calculation is not None:
        result = calculation['result']
        calculation_display(result)
        render_chart(create_spectrum_figure(result.interpolated), title=UI_SECTIONS['chart'])
        spectrum_display(result)
        download_buttons(calculation['downloads'])

    if show_weighting:
        render_chart(create_weighting_figure(tables), title=UI_SECTIONS['weighting_chart'])
