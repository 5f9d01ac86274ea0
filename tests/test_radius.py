"""
test_radius.py — Bubble radius scaling and the focus zoom picker.
"""

import math

import pytest

from fencemap.services.radius import MAX_RADIUS, MIN_RADIUS, radius_for, zoom_factor
from fencemap.services.zoom import clamp_zoom, target_zoom


class TestRadius:

    def test_zero_value_gets_minimum_radius(self):
        assert radius_for(0, 4) == MIN_RADIUS

    def test_negative_value_sized_as_zero(self):
        assert radius_for(-50, 4) == MIN_RADIUS

    def test_nan_sized_as_zero(self):
        assert radius_for(math.nan, 4) == MIN_RADIUS

    def test_default_zoom_has_unit_factor(self):
        # 1.8 * sqrt(100) * 1.2**0
        assert radius_for(100, 4) == pytest.approx(18.0)

    def test_grows_with_zoom(self):
        # 18 * 1.2**2
        assert radius_for(100, 6) == pytest.approx(25.92)

    def test_shrinks_below_default_zoom(self):
        assert radius_for(100, 3) == pytest.approx(15.0)

    def test_clamped_to_maximum(self):
        assert radius_for(10_000, 4) == MAX_RADIUS

    def test_monotonic_in_value(self):
        radii = [radius_for(v, 5) for v in (0, 10, 50, 100, 200)]
        assert radii == sorted(radii)

    def test_custom_base(self):
        assert radius_for(100, 4, base=1.0) == pytest.approx(10.0)

    def test_zoom_factor(self):
        assert zoom_factor(4) == 1.0
        assert zoom_factor(8) == pytest.approx(1.2 ** 4)


class TestTargetZoom:

    def test_remote_jumps_to_six(self):
        assert target_zoom("Hawaii", 3) == 6
        assert target_zoom("Alaska", 4) == 6

    def test_contiguous_jumps_to_seven(self):
        assert target_zoom("Ohio", 3) == 7

    def test_at_base_steps_in_by_one(self):
        assert target_zoom("Ohio", 7) == 8
        assert target_zoom("Hawaii", 6) == 7

    def test_capped_at_eight(self):
        assert target_zoom("Ohio", 8) == 8
        assert target_zoom("Ohio", 10) == 8

    def test_unknown_name_treated_as_contiguous(self):
        assert target_zoom("Atlantis", 4) == 7


class TestClampZoom:

    @pytest.mark.parametrize("raw, expected", [(1, 3), (3, 3), (5.4, 5), (5.6, 6), (12, 10)])
    def test_bounds_and_rounding(self, raw, expected):
        assert clamp_zoom(raw) == expected
