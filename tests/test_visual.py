"""
Tests for the visualization inputs: hue shift and lensing strength.
"""

import pytest

from relativity.constants import M_SUN
from relativity.horizon import schwarzschild_radius
from relativity.visual import hue_shift, lensing_strength


class TestHueShift:

    def test_neutral(self):
        assert hue_shift(1.0) == 0.0

    def test_sign_follows_ratio(self):
        assert hue_shift(1.0 + 1e-12) > 0
        assert hue_shift(1.0 - 1e-12) < 0

    def test_sqrt_compression(self):
        """|R-1| = 1e-12 -> sqrt = 1e-6 -> * 2e4 = 0.02."""
        assert hue_shift(1.0 + 1e-12) == pytest.approx(0.02, rel=1e-3)

    def test_saturates(self):
        assert hue_shift(1.0 + 1e-6) == 1.0
        assert hue_shift(0.5) == -1.0

    def test_zero_ratio(self):
        assert hue_shift(0.0) == -1.0

    @pytest.mark.parametrize("ratio", [0.0, 0.01, 0.999999, 1.0, 1.0000001, 2.0, 1e9])
    def test_bounded(self, ratio):
        assert -1.0 <= hue_shift(ratio) <= 1.0


class TestLensingStrength:

    def test_earth_weak(self):
        s = lensing_strength(5.972e24, 6.371e6)
        assert s == pytest.approx(0.143, abs=0.01)

    def test_moon_clamped_to_zero(self):
        assert lensing_strength(7.347673e22, 1.7374e6) == 0.0

    def test_neutron_star_saturates(self):
        assert lensing_strength(1.4 * M_SUN, 12000.0) == 1.0

    def test_sun_strong(self):
        assert 0.85 < lensing_strength(M_SUN, 6.9634e8) < 1.0

    def test_increases_with_compactness(self):
        radii = [1e10, 1e9, 1e8, 1e7]
        values = [lensing_strength(M_SUN, r) for r in radii]
        for a, b in zip(values, values[1:]):
            assert b >= a
        assert values[-1] > values[0]

    def test_zero_mass(self):
        assert lensing_strength(0.0, 1.0) == 0.0

    def test_tiny_radius_guarded(self):
        assert lensing_strength(1.0, 0.0) == lensing_strength(1.0, 1e-3)

    def test_at_horizon(self):
        rs = schwarzschild_radius(10 * M_SUN)
        assert lensing_strength(10 * M_SUN, rs) == 1.0
