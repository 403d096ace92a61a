"""
Unit tests for the tables module.

These tests verify the layout of the precomputed tables and that the
factored harmonics reconstruct the directly evaluated ones.
"""

import pytest
import numpy as np
import math
from sphenc.codec.config import MAX_ORDER
from sphenc.codec.math_utils import real_spherical_harmonic, spread_weights
from sphenc.codec.tables import (
    SPHERICAL_HARMONICS, MAX_RE_WEIGHTS, SphericalHarmonicsTable, MaxReWeightTable,
    elevation_term_count, elevation_term_index, azimuth_term_index
)


class TestTermPacking:
    """Tests for the column packing of the factored table."""

    def test_elevation_terms_are_contiguous(self):
        """Every (l, |m|) pair for l >= 1 maps to its own column, in order."""
        terms = [elevation_term_index(l, m) for l in range(1, MAX_ORDER + 1) for m in range(l + 1)]
        assert terms == list(range(elevation_term_count()))

    def test_elevation_term_ignores_sign(self):
        assert elevation_term_index(3, -2) == elevation_term_index(3, 2)

    def test_azimuth_term_layout(self):
        """Sine terms fill the first half, cosine terms the second."""
        assert [azimuth_term_index(m) for m in range(-MAX_ORDER, 0)] == list(range(MAX_ORDER))
        assert [azimuth_term_index(m) for m in range(1, MAX_ORDER + 1)] == \
            list(range(MAX_ORDER, 2 * MAX_ORDER))


class TestSphericalHarmonicsTable:
    """Tests for the factored spherical harmonics table."""

    def test_shapes(self):
        assert SPHERICAL_HARMONICS.elevation.shape == (181, elevation_term_count())
        assert SPHERICAL_HARMONICS.azimuth.shape == (360, 2 * MAX_ORDER)

    def test_read_only(self):
        with pytest.raises(ValueError):
            SPHERICAL_HARMONICS.elevation[0, 0] = 1.0
        with pytest.raises(ValueError):
            SPHERICAL_HARMONICS.azimuth[0, 0] = 1.0

    def test_reconstruction_matches_direct_evaluation(self):
        """Elevation × azimuth factors equal Y_l^m on the integer-degree grid."""
        for azimuth in range(0, 360, 17):
            for elevation in range(-90, 91, 13):
                for l in range(1, MAX_ORDER + 1):
                    for m in range(-l, l + 1):
                        value = SPHERICAL_HARMONICS.elevation_factor(elevation + 90,
                                                                     elevation_term_index(l, m))
                        if m != 0:
                            value *= SPHERICAL_HARMONICS.azimuth_factor(azimuth, azimuth_term_index(m))
                        expected = real_spherical_harmonic(l, m, math.radians(azimuth),
                                                           math.radians(elevation))
                        assert value == pytest.approx(expected, abs=1e-12)

    def test_front_horizon_first_order(self):
        """At azimuth 0 and the horizon only the cosine / |m| = l terms survive."""
        assert SPHERICAL_HARMONICS.elevation_factor(90, elevation_term_index(1, 0)) == 0.0
        assert SPHERICAL_HARMONICS.elevation_factor(90, elevation_term_index(1, 1)) == pytest.approx(1.0)
        assert SPHERICAL_HARMONICS.azimuth_factor(0, azimuth_term_index(-1)) == 0.0
        assert SPHERICAL_HARMONICS.azimuth_factor(0, azimuth_term_index(1)) == 1.0

    def test_lower_order_table(self):
        table = SphericalHarmonicsTable(max_order=1)
        assert table.elevation.shape == (181, 2)
        assert table.azimuth.shape == (360, 2)


class TestMaxReWeightTable:
    """Tests for the spread weighting table."""

    def test_shape(self):
        assert MAX_RE_WEIGHTS.weights.shape == (360, MAX_ORDER)

    def test_degree_zero_is_never_attenuated(self):
        for spread in (0, 90, 359):
            assert MAX_RE_WEIGHTS.weight(spread, 0) == 1.0

    def test_point_source(self):
        for l in range(1, MAX_ORDER + 1):
            assert MAX_RE_WEIGHTS.weight(0, l) == 1.0

    def test_monotonic_in_spread(self):
        for l in range(1, MAX_ORDER + 1):
            column = [MAX_RE_WEIGHTS.weight(s, l) for s in range(360)]
            assert all(b <= a for a, b in zip(column, column[1:]))

    def test_monotonic_in_degree(self):
        for spread in range(0, 360, 10):
            row = [MAX_RE_WEIGHTS.weight(spread, l) for l in range(MAX_ORDER + 1)]
            assert all(b <= a for a, b in zip(row, row[1:]))

    def test_values_in_unit_interval(self):
        assert np.all(MAX_RE_WEIGHTS.weights >= 0.0)
        assert np.all(MAX_RE_WEIGHTS.weights <= 1.0)

    def test_read_only(self):
        with pytest.raises(ValueError):
            MAX_RE_WEIGHTS.weights[0, 0] = 0.5

    def test_lower_order_table(self):
        assert MaxReWeightTable(max_order=2).weights.shape == (360, 2)

    def test_values_follow_diffusion_kernel(self):
        """Each weight is exp(-l(l+1)σ²/2) with σ half the spread in radians."""
        np.testing.assert_array_equal(MAX_RE_WEIGHTS.weights, spread_weights(np.arange(360), MAX_ORDER))
        for spread in (0, 45, 180, 359):
            sigma = math.radians(spread) / 2.0
            for l in range(1, MAX_ORDER + 1):
                assert MAX_RE_WEIGHTS.weight(spread, l) == pytest.approx(
                    math.exp(-0.5 * l * (l + 1) * sigma ** 2))
