"""
tests/test_models.py

Core data models.
"""
import numpy as np
import pytest

from models.core import (
    ConversionFactors, Quantity, SampleRow, SpectralDataset, WEIGHTING_NAMES
)
from models.errors import ContractViolationError


def test_dataset_from_rows():
    dataset = SpectralDataset.from_rows([(400.0, [1.0, 2.0]), (410.0, (3.0, 4.0))])
    assert len(dataset) == 2
    assert dataset.channel_count == 2
    assert dataset.samples.shape == (2, 2)


def test_dataset_iterates_sample_rows():
    dataset = SpectralDataset.from_rows([(400.0, [1.0, 2.0])])
    row = next(iter(dataset))
    assert isinstance(row, SampleRow)
    assert row == SampleRow(400.0, (1.0, 2.0))


def test_dataset_is_read_only():
    dataset = SpectralDataset.from_rows([(400.0, [1.0])])
    with pytest.raises(ValueError):
        dataset.samples[0, 0] = 5.0
    with pytest.raises(ValueError):
        dataset.wavelengths[0] = 401.0


def test_dataset_copies_its_input():
    samples = np.array([[1.0], [2.0]])
    dataset = SpectralDataset(np.array([400.0, 500.0]), samples)
    samples[0, 0] = 99.0
    assert dataset.samples[0, 0] == 1.0


def test_ragged_rows_are_a_contract_violation():
    with pytest.raises(ContractViolationError):
        SpectralDataset.from_rows([(400.0, [1.0, 2.0]), (500.0, [1.0])])


def test_shape_mismatch_is_a_contract_violation():
    with pytest.raises(ContractViolationError):
        SpectralDataset(np.array([400.0, 500.0]), np.ones((3, 1)))


def test_empty_dataset_keeps_requested_channel_count():
    dataset = SpectralDataset.from_rows([], channel_count=3)
    assert dataset.is_empty
    assert dataset.channel_count == 3


def test_quantity_order_and_scales():
    assert WEIGHTING_NAMES == ("luminance", "sCone", "mCone", "lCone", "rod", "mel")
    assert Quantity.LUMINANCE.output_scale == 683.002
    assert all(q.output_scale == 1000.0 for q in Quantity if q is not Quantity.LUMINANCE)
    assert Quantity.ROD.label == "Rhodopic irradiance (mW/m²)"


def test_default_conversion_factors_are_identity():
    assert ConversionFactors() == ConversionFactors(area_scale=1.0, power_scale=1.0)
