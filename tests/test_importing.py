"""
tests/test_importing.py

CSV import of measured spectra.
"""
import io

import numpy as np
import pytest

from services.importing import RowError, detect_separator, parse_spectrum_csv, safe_float


def _csv(text: str) -> io.BytesIO:
    return io.BytesIO(text.encode("utf-8"))


def test_comma_separated_with_header():
    result = parse_spectrum_csv(_csv("Wavelength,S0,S1\n400,1,2\n500,3,4\n"))

    assert not result.has_errors
    assert len(result.dataset) == 2
    assert result.channel_count == 2
    np.testing.assert_allclose(result.dataset.wavelengths, [400.0, 500.0])
    np.testing.assert_allclose(result.dataset.samples, [[1.0, 2.0], [3.0, 4.0]])


def test_semicolon_separated_with_decimal_comma():
    result = parse_spectrum_csv(_csv("400;1,5\n500;2,25\n"))
    assert len(result.dataset) == 2
    np.testing.assert_allclose(result.dataset.samples[:, 0], [1.5, 2.25])


def test_tab_separated():
    result = parse_spectrum_csv(_csv("400\t1.0\t0.5\n410\t2.0\t0.25\n"))
    assert result.channel_count == 2
    np.testing.assert_allclose(result.dataset.samples[1], [2.0, 0.25])


def test_rows_are_sorted_by_wavelength():
    result = parse_spectrum_csv(_csv("600,3\n400,1\n500,2\n"))
    np.testing.assert_allclose(result.dataset.wavelengths, [400.0, 500.0, 600.0])
    np.testing.assert_allclose(result.dataset.samples[:, 0], [1.0, 2.0, 3.0])


def test_bad_rows_are_reported_with_line_numbers():
    text = (
        "Wavelength,Sample\n"   # 1
        "400,1\n"               # 2
        "abc,2\n"               # 3
        "500,x\n"               # 4
        "600,1,2\n"             # 5
        "2500,1\n"              # 6
        "400,3\n"               # 7
        "700,4\n"               # 8
    )
    result = parse_spectrum_csv(_csv(text))

    assert result.has_errors
    assert [error.row for error in result.errors] == [3, 4, 5, 6, 7]
    assert result.errors[0] == RowError(3, "Wavelength 'abc' is not a number.")
    assert result.errors[1].message == "Sample 0 ('x') is not a number."
    assert result.errors[2].message == "Expected 1 samples but found 2."
    assert result.errors[3].message == "Wavelength 2500 nm is outside 200-2000 nm."
    assert result.errors[4].message == "Duplicate wavelength 400 nm (first seen on line 2)."

    np.testing.assert_allclose(result.dataset.wavelengths, [400.0, 700.0])
    np.testing.assert_allclose(result.dataset.samples[:, 0], [1.0, 4.0])


def test_row_without_samples_is_rejected():
    result = parse_spectrum_csv(_csv("400,1\n500\n"))
    assert result.errors == [RowError(2, "Row has no sample values.")]
    assert len(result.dataset) == 1


def test_blank_lines_keep_line_numbering():
    result = parse_spectrum_csv(_csv("400,1\n\n500,x\n"))
    assert result.errors[0].row == 3


def test_file_with_no_valid_rows_gives_empty_dataset():
    result = parse_spectrum_csv(_csv("Wavelength,Sample\nfoo,1\nbar,2\n"))
    assert result.dataset.is_empty
    assert len(result.errors) == 2


def test_empty_file_raises_value_error():
    with pytest.raises(ValueError):
        parse_spectrum_csv(_csv("   \n"))


def test_reads_paths_and_byte_order_marks(tmp_path):
    path = tmp_path / "lamp.csv"
    path.write_bytes("\ufeff450,0.5\n".encode("utf-8"))
    result = parse_spectrum_csv(path)
    assert not result.has_errors
    np.testing.assert_allclose(result.dataset.samples, [[0.5]])


def test_detect_separator():
    assert detect_separator("400;1,5\n") == ";"
    assert detect_separator("\n400\t1\n") == "\t"
    assert detect_separator("400,1\n") == ","
    assert detect_separator("400\n") == ","


def test_safe_float():
    assert safe_float("1.5") == 1.5
    assert safe_float("1,5", decimal_comma=True) == 1.5
    assert np.isnan(safe_float("1,5"))
    assert np.isnan(safe_float(None))
