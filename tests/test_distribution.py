#!/usr/bin/env python3
"""
Unit tests for the discretized Maxwell distribution.
"""

import math

import numpy as np
import pytest

from maxwell_sums.distribution import (
    DEFAULT_DV,
    DEFAULT_SIZE,
    maxwell_dataset,
    theoretical_mean_abs,
    validate_temperature,
)


class TestMaxwellDataset:
    """Test cases for dataset generation."""

    def test_shapes_and_types(self, small_dataset):
        d = small_dataset
        assert d.size == 1000
        for array in (d.psi, d.abs_psi, d.pdf):
            assert array.shape == (1000,)
            assert array.dtype == np.float32
        assert isinstance(d.dv, np.float32)
        assert d.temperature == 1.0

    def test_defaults(self):
        assert DEFAULT_SIZE == 1_000_000
        assert DEFAULT_DV == 1e-3

    def test_arrays_are_read_only(self, small_dataset):
        with pytest.raises(ValueError):
            small_dataset.psi[0] = 0.0
        with pytest.raises(ValueError):
            small_dataset.pdf[0] = 0.0

    def test_grid(self, small_dataset):
        d = small_dataset
        step = float(np.float32(0.01))

        assert d.psi[0] == np.float32(-500 * step)
        np.testing.assert_allclose(np.diff(d.psi.astype(np.float64)), step, rtol=1e-4)
        assert abs(float(d.psi[500])) < 1e-6

    def test_grid_is_symmetric(self, small_dataset):
        d = small_dataset
        # psi[i] pairs with psi[size - i]; psi[0] has no partner
        np.testing.assert_allclose(d.psi[1:500], -d.psi[:500:-1], atol=1e-6)
        np.testing.assert_allclose(d.pdf[1:500], d.pdf[:500:-1], rtol=1e-5)

    def test_absolute_values(self, small_dataset):
        d = small_dataset
        np.testing.assert_array_equal(d.abs_psi, np.abs(d.psi))
        assert (d.abs_psi >= 0).all()

    def test_density_formula(self, small_dataset):
        d = small_dataset
        v = d.psi.astype(np.float64)
        expected = np.exp(-v * v) / math.sqrt(math.pi)
        np.testing.assert_allclose(d.pdf, expected, rtol=1e-6, atol=1e-30)

    def test_density_is_normalized(self, small_dataset):
        d = small_dataset
        total = float(np.sum(d.pdf, dtype=np.float64)) * float(d.dv)
        assert abs(total - 1.0) < 1e-5

    def test_temperature_scales_width(self):
        narrow = maxwell_dataset(0.5, dv=0.01, size=1000)
        wide = maxwell_dataset(4.0, dv=0.01, size=1000)
        assert narrow.pdf[500] > wide.pdf[500]
        assert narrow.pdf[500] == pytest.approx(1 / math.sqrt(0.5 * math.pi), rel=1e-6)

    @pytest.mark.parametrize("temperature", [0, -1.0, float("nan"), float("inf"), "1.0", None, True])
    def test_invalid_temperature(self, temperature):
        with pytest.raises(ValueError):
            maxwell_dataset(temperature, dv=0.01, size=10)

    @pytest.mark.parametrize("size", [0, -5, 2.5, True])
    def test_invalid_size(self, size):
        with pytest.raises(ValueError):
            maxwell_dataset(1.0, dv=0.01, size=size)

    @pytest.mark.parametrize("dv", [0, -0.01, float("nan"), "0.01"])
    def test_invalid_step(self, dv):
        with pytest.raises(ValueError):
            maxwell_dataset(1.0, dv=dv, size=10)


class TestTheory:
    """Test cases for the analytic prediction."""

    def test_unit_temperature(self):
        assert theoretical_mean_abs(1.0) == pytest.approx(0.5641895835, abs=1e-10)

    def test_scaling(self):
        assert theoretical_mean_abs(4.0) == pytest.approx(2 * theoretical_mean_abs(1.0))

    def test_validate_temperature(self):
        assert validate_temperature(3) == 3.0
        assert isinstance(validate_temperature(np.float32(2.0)), float)
        with pytest.raises(ValueError):
            theoretical_mean_abs(0.0)
