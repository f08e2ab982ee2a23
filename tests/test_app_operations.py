"""
tests/test_app_operations.py

Workflow glue, charts and UI helpers used by the Streamlit views.
"""
import io

import pytest

from models.core import Quantity, SpectralDataset
from models.errors import ConfigurationError, InsufficientDataError
from services.app_operations import calculate_spectrum, import_spectrum
from services.importing import RowError
from services.visualization import channel_color, create_spectrum_figure, create_weighting_figure
from views.ui_utils import describe_error, row_errors_frame


def test_upload_to_downloads(tables):
    upload = io.BytesIO(b"Wavelength;S0;S1\n400;1,0;2,0\n500;3,0;4,0\n")
    upload.name = "lamp.csv"

    imported = import_spectrum(upload)
    calculation = calculate_spectrum(imported.dataset, "cm²", "mW", tables=tables, source_name=upload.name)

    result = calculation['result']
    assert result.channel_count == 2
    assert set(result.totals) == set(Quantity)
    assert calculation['downloads']['calculation']['name'] == "calculation_lamp.csv"


def test_unknown_unit_is_a_configuration_error(tables):
    dataset = SpectralDataset.from_rows([(500.0, [1.0])])
    with pytest.raises(ConfigurationError):
        calculate_spectrum(dataset, "acre", "W", tables=tables)


def test_empty_dataset_propagates_insufficient_data(tables):
    with pytest.raises(InsufficientDataError):
        calculate_spectrum(SpectralDataset.from_rows([], 1), "m²", "W", tables=tables)


def test_spectrum_figure_has_one_trace_per_channel(tables):
    dataset = SpectralDataset.from_rows([(400.0, [1.0, 2.0, 3.0]), (500.0, [1.0, 2.0, 3.0])])
    calculation = calculate_spectrum(dataset, "m²", "W", tables=tables)
    fig = create_spectrum_figure(calculation['result'].interpolated)

    assert [trace.name for trace in fig.data] == ["S0", "S1", "S2"]
    assert len(fig.data[0].x) == 401
    assert fig.data[1].line.color == channel_color(1)
    assert fig.layout.xaxis.title.text == "Wavelength [nm]"


def test_channel_colors_repeat():
    assert channel_color(0) == channel_color(10)
    assert channel_color(0) != channel_color(1)


def test_weighting_figure(tables):
    fig = create_weighting_figure(tables)
    assert [trace.name for trace in fig.data] == list(tables.names)


def test_describe_error():
    assert describe_error(ConfigurationError("Power scale cannot be zero.")) == \
        "Invalid unit selection: Power scale cannot be zero."
    assert describe_error(ValueError("bad")) == "ValueError: bad"


def test_row_errors_frame():
    frame = row_errors_frame([RowError(3, "Wavelength 'abc' is not a number.")])
    assert list(frame.columns) == ["Row", "Problem"]
    assert frame.loc[0, "Row"] == 3
