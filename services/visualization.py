"""
Visualization services for SPD Lab.

This module builds the interactive Plotly charts shown in the main view:
- Interpolated spectrum, one line per sample channel
- The six weighting functions on the canonical grid
"""
# Standard library imports
from typing import Optional

# Third-party imports
import plotly.graph_objects as go

# Local imports
from models.constants import (
    CHANNEL_COLORS, CHART_HEIGHTS, CHART_LINE_STYLES,
    SPECTRAL_IRRADIANCE_HEADER, WAVELENGTH_HEADER, WEIGHTING_COLORS
)
from models.core import SpectralDataset
from services.calculations import sample_labels
from services.weighting import WeightingTables


def channel_color(index: int) -> str:
    """Color of a sample channel; the palette repeats after ten channels."""
    return CHANNEL_COLORS[index % len(CHANNEL_COLORS)]


def apply_plotly_default_style(fig, title, x_title=WAVELENGTH_HEADER, y_title="Response", height=None):
    """Apply consistent default styling to Plotly figures."""
    fig.update_layout(
        title=title,
        xaxis_title=x_title,
        yaxis_title=y_title,
        template="plotly_white",
        height=height or CHART_HEIGHTS['default'],
        hovermode='x unified'
    )
    return fig


def create_spectrum_figure(dataset: SpectralDataset, title: str = "",
                           height: Optional[int] = None) -> go.Figure:
    """
    Create the interpolated spectrum chart.

    Args:
        dataset: Rows on the canonical grid, in W/(m² nm)
        title: Chart title
        height: Chart height in pixels

    Returns:
        Figure with one trace per channel, named S0, S1, ...
    """
    fig = go.Figure()

    for channel, label in enumerate(sample_labels(dataset.channel_count)):
        fig.add_trace(go.Scatter(
            x=dataset.wavelengths,
            y=dataset.samples[:, channel],
            mode='lines',
            name=label,
            line=dict(color=channel_color(channel), **CHART_LINE_STYLES['default'])
        ))

    return apply_plotly_default_style(
        fig, title,
        y_title=SPECTRAL_IRRADIANCE_HEADER,
        height=height or CHART_HEIGHTS['standard_plot']
    )


def create_weighting_figure(tables: WeightingTables, title: str = "",
                            height: Optional[int] = None) -> go.Figure:
    """Create a chart of every weighting function in ``tables``."""
    fig = go.Figure()

    for function in tables:
        fig.add_trace(go.Scatter(
            x=function.wavelengths,
            y=function.weights,
            mode='lines',
            name=function.name,
            hovertext=function.description,
            line=dict(color=WEIGHTING_COLORS.get(function.name, "#333333"),
                      **CHART_LINE_STYLES['weighting'])
        ))

    return apply_plotly_default_style(
        fig, title,
        y_title="Relative weight",
        height=height or CHART_HEIGHTS['standard_plot']
    )
