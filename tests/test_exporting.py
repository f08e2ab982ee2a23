"""
tests/test_exporting.py

Calculation and spectrum tables and their CSV downloads.
"""
import io

import numpy as np
import pandas as pd

from models.core import CalculationResult, Quantity, SpectralDataset
from services.calculations import format_totals
from services.exporting import (
    build_calculation_table, build_downloads, build_spectrum_table,
    export_filename, spectrum_table_caption, to_csv_bytes
)


def _result() -> CalculationResult:
    converted = SpectralDataset.from_rows([(400.0, [136.0, 0.0136]), (500.5, [13600000000.0, 1.0])])
    totals = {quantity: np.array([float(i), 123.456]) for i, quantity in enumerate(Quantity)}
    return CalculationResult(totals=totals, converted=converted, interpolated=converted)


def test_calculation_table_layout():
    table = build_calculation_table(_result())

    assert list(table.columns) == ["Condition", "S0", "S1"]
    assert list(table["Condition"]) == [
        "Illuminance [lux]",
        "S-cone-opic irradiance (mW/m²)",
        "M-cone-opic irradiance (mW/m²)",
        "L-cone-opic irradiance (mW/m²)",
        "Rhodopic irradiance (mW/m²)",
        "Melanopic irradiance (mW/m²)",
    ]
    assert table.loc[2, "S0"] == "2.00"
    assert table.loc[5, "S1"] == "123.46"


def test_calculation_table_rows_are_the_formatted_totals():
    result = _result()
    table = build_calculation_table(result)
    rows = {row[0]: list(row[1:]) for row in table.itertuples(index=False)}
    assert rows == format_totals(result.totals)


def test_spectrum_table_uses_converted_rows():
    table = build_spectrum_table(_result().converted)

    assert list(table.columns) == ["Wavelength [nm]", "S0", "S1"]
    assert list(table["Wavelength [nm]"]) == ["400", "500.5"]
    assert list(table["S0"]) == ["1.36e+02", "1.36e+10"]
    assert list(table["S1"]) == ["1.36e-02", "1.00e+00"]


def test_spectrum_table_caption():
    assert spectrum_table_caption(1).endswith("1 sample")
    assert spectrum_table_caption(3).endswith("3 samples")


def test_csv_bytes_round_trip_through_pandas():
    table = build_calculation_table(_result())
    parsed = pd.read_csv(io.BytesIO(to_csv_bytes(table)), dtype=str)
    assert list(parsed.columns) == ["Condition", "S0", "S1"]
    assert parsed.loc[0, "Condition"] == "Illuminance [lux]"


def test_export_filename():
    assert export_filename("calculation", "my lamp.csv") == "calculation_my_lamp.csv"
    assert export_filename("spectrum", "") == "spectrum.csv"
    assert export_filename("spectrum", 'a/b:c.txt') == "spectrum_abc.csv"


def test_build_downloads():
    downloads = build_downloads(_result(), "lamp.csv")

    assert downloads['calculation']['name'] == "calculation_lamp.csv"
    assert downloads['spectrum']['name'] == "spectrum_lamp.csv"
    assert downloads['calculation']['bytes'].startswith(b"Condition,S0,S1")
    assert downloads['spectrum']['bytes'].decode("utf-8").splitlines()[1] == "400,1.36e+02,1.36e-02"
