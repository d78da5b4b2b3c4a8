"""
Tests for dilation curves sampled along altitude or horizon multiplier.
"""

import pytest

from relativity.constants import HORIZON_MULTIPLIER_MIN
from relativity.observer import CircularOrbit, StaticAtAltitude
from relativity.pipeline import compare
from relativity.sweep import MIN_POINTS, MAX_POINTS, clamp_points, dilation_curve, sample_axis


class TestClampPoints:

    @pytest.mark.parametrize("n,expected", [
        (1, MIN_POINTS), (10, 10), (123, 123), (500, 500), (10000, MAX_POINTS),
    ])
    def test_bounds(self, n, expected):
        assert clamp_points(n) == expected

    def test_custom_max(self):
        assert clamp_points(400, max_points=100) == 100

    def test_custom_max_above_default(self):
        assert clamp_points(800, max_points=1000) == 800

    def test_cap_below_minimum_wins(self):
        assert clamp_points(50, max_points=4) == 4
        assert clamp_points(1, max_points=4) == 4

    def test_string_number(self):
        assert clamp_points("50") == 50


class TestSampleAxis:

    def test_altitude_axis(self, catalog):
        axis, values = sample_axis(catalog.get("earth"), 1.0e7, 11)
        assert axis == "altitude_m"
        assert values[0] == 0.0
        assert values[-1] == pytest.approx(1.0e7)
        assert values[1] - values[0] == pytest.approx(1.0e6)

    def test_multiplier_axis(self, catalog):
        axis, values = sample_axis(catalog.get("bh10"), 50.0, 20)
        assert axis == "multiplier"
        assert values[0] == pytest.approx(HORIZON_MULTIPLIER_MIN)
        assert values[-1] == pytest.approx(50.0)

    def test_multiplier_extent_floor(self, catalog):
        _, values = sample_axis(catalog.get("bh10"), 0.5, 10)
        assert values[-1] > values[0]


class TestDilationCurve:

    def test_lengths(self, catalog):
        curve = dilation_curve(catalog.get("earth"), 4.0e7, num_points=50)
        n = len(curve["values"])
        assert n == 50
        assert len(curve["f_body"]) == n
        assert len(curve["ratio"]) == n
        assert len(curve["per_day_seconds"]) == n

    def test_first_point_is_surface(self, catalog):
        curve = dilation_curve(catalog.get("earth"), 4.0e7, num_points=10)
        assert curve["ratio"][0] == 1.0

    def test_static_curve_increasing(self, catalog):
        curve = dilation_curve(catalog.get("earth"), 4.0e7, num_points=40)
        for a, b in zip(curve["ratio"], curve["ratio"][1:]):
            assert b > a

    def test_orbit_curve_matches_compare(self, catalog):
        earth = catalog.get("earth")
        curve = dilation_curve(earth, 4.0e7, num_points=10, orbiting=True)
        alt = curve["values"][5]
        assert curve["ratio"][5] == compare(earth, CircularOrbit(alt)).ratio

    def test_orbit_crosses_one(self, catalog):
        """Low orbits lose time, high orbits gain: GPS-style crossover."""
        curve = dilation_curve(catalog.get("earth"), 2.02e7, num_points=100, orbiting=True)
        assert curve["ratio"][1] < 1.0
        assert curve["ratio"][-1] > 1.0

    def test_black_hole_monotonic(self, catalog):
        curve = dilation_curve(catalog.get("sgr_a"), 50.0, num_points=60)
        assert curve["axis"] == "multiplier"
        assert curve["f_body"][0] > 0.0
        for a, b in zip(curve["f_body"], curve["f_body"][1:]):
            assert b > a

    def test_exact_static_flag(self, catalog):
        ns = catalog.get("neutron_star")
        weak = dilation_curve(ns, 1.0e5, num_points=10)
        exact = dilation_curve(ns, 1.0e5, num_points=10, exact_static=True)
        assert exact["f_body"][0] < weak["f_body"][0]
        assert exact["f_body"][0] == compare(ns, StaticAtAltitude(0.0), exact_static=True).f_body

    def test_max_points_passed_through(self, catalog):
        curve = dilation_curve(catalog.get("moon"), 1.0e6, num_points=800, max_points=1000)
        assert len(curve["values"]) == 800
        capped = dilation_curve(catalog.get("moon"), 1.0e6, num_points=800)
        assert len(capped["values"]) == MAX_POINTS

    def test_json_plain_floats(self, catalog):
        curve = dilation_curve(catalog.get("earth"), 1.0e6, num_points=10)
        assert all(type(v) is float for v in curve["values"])
