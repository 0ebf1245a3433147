# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for degree trigonometry and angle wrapping."""
import math

import pytest

from marsdate.domain.angles import (
    acos_deg,
    asin_deg,
    atan2_deg,
    cos_deg,
    sin_deg,
    wrap,
    wrap_degrees,
    wrap_hours,
)


class TestDegreeTrig:

    def test_sin_cos(self):
        assert sin_deg(30.0) == pytest.approx(0.5)
        assert cos_deg(60.0) == pytest.approx(0.5)

    def test_returns_python_float(self):
        assert type(sin_deg(10.0)) is float
        assert type(acos_deg(0.5)) is float

    def test_inverse_clipped(self):
        assert acos_deg(1.0 + 1e-12) == 0.0
        assert asin_deg(-1.0 - 1e-12) == pytest.approx(-90.0)
        assert not math.isnan(acos_deg(-1.0000001))

    def test_atan2_quadrants(self):
        assert atan2_deg(1.0, 0.0) == pytest.approx(90.0)
        assert atan2_deg(-1.0, 0.0) == pytest.approx(-90.0)
        assert atan2_deg(0.0, -1.0) == pytest.approx(180.0)


class TestWrap:

    def test_negative(self):
        assert wrap_degrees(-10.0) == pytest.approx(350.0)
        assert wrap_hours(-1.0) == pytest.approx(23.0)

    def test_full_period_is_zero(self):
        assert wrap_degrees(360.0) == 0.0
        assert wrap_hours(48.0) == 0.0

    def test_tiny_negative_stays_below_period(self):
        assert 0.0 <= wrap(-1e-20, 360.0) < 360.0

    def test_large_values(self):
        assert wrap_degrees(3600.0 + 45.0) == pytest.approx(45.0)
