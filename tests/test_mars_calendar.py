# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for Mars Sol Date, Mars Year, equation of time and Mean Solar Time."""
from datetime import datetime, timedelta, timezone

import pytest

from marsdate.domain.mars_calendar import (
    MARS_MILLIS_PER_YEAR,
    MARS_YEAR_EPOCH_MILLIS,
    MarsClock,
    derive_mars_clock,
    equation_of_time_deg,
    local_mars_sol_date,
    mars_sol_date,
    mars_sol_date_of,
    mars_year,
    mean_solar_time_hours,
    sol_number,
)
from marsdate.domain.mars_orbit import solve_mars_orbit
from marsdate.domain.time_systems import as_unix_millis, compute_time_scales

_EXAMPLE = datetime(2000, 1, 6, 0, 0, 0, tzinfo=timezone.utc)
_SPIRIT_LANDING = datetime(2004, 1, 4, 4, 35, 0, tzinfo=timezone.utc)


# ── Mars Sol Date ─────────────────────────────────────────────────

class TestMarsSolDate:

    def test_origin(self):
        assert mars_sol_date(2451549.5) == pytest.approx(44796.0 - 0.0009626)

    def test_one_sol_per_sol_length(self):
        a = mars_sol_date(2451549.5)
        b = mars_sol_date(2451549.5 + 1.0274912517)
        assert b - a == pytest.approx(1.0, abs=1e-9)

    def test_worked_example(self):
        """Allison & McEwen 2000-01-06: MSD = 44795.99976."""
        assert mars_sol_date_of(_EXAMPLE) == pytest.approx(44795.99976, abs=1e-5)

    def test_spirit_landing(self):
        assert mars_sol_date_of(_SPIRIT_LANDING) == pytest.approx(46216.149, abs=1e-3)

    def test_of_accepts_millis(self):
        assert mars_sol_date_of(as_unix_millis(_EXAMPLE)) == mars_sol_date_of(_EXAMPLE)

    def test_monotonic(self):
        previous = mars_sol_date_of(datetime(1960, 1, 1, tzinfo=timezone.utc))
        for days in range(1, 30_000, 41):
            current = mars_sol_date_of(
                datetime(1960, 1, 1, tzinfo=timezone.utc) + timedelta(days=days))
            assert current > previous
            previous = current

    def test_sol_number(self):
        assert sol_number(46216.149) == 46216
        assert sol_number(-0.5) == -1

    def test_local_sol_date_shifts_west(self):
        assert local_mars_sol_date(100.0, 90.0) == pytest.approx(99.75)
        assert local_mars_sol_date(100.0, 0.0) == 100.0


# ── Mean Solar Time ───────────────────────────────────────────────

class TestMeanSolarTime:

    def test_fraction_of_sol(self):
        assert mean_solar_time_hours(44796.5) == pytest.approx(12.0)

    def test_worked_example(self):
        """Allison & McEwen 2000-01-06: MST = 23.99425 h (23:59:39)."""
        msd = mars_sol_date_of(_EXAMPLE)
        assert mean_solar_time_hours(msd) == pytest.approx(23.99425, abs=1e-4)

    def test_negative_msd_wraps_into_range(self):
        assert mean_solar_time_hours(-0.25) == pytest.approx(18.0)

    def test_range(self):
        for i in range(-2000, 2000):
            mst = mean_solar_time_hours(44796.0 + i * 0.137)
            assert 0.0 <= mst < 24.0


# ── Equation of time ──────────────────────────────────────────────

class TestEquationOfTime:

    def test_worked_example(self):
        """Allison & McEwen 2000-01-06: EOT = -5.18774°."""
        millis = as_unix_millis(_EXAMPLE)
        orbit = solve_mars_orbit(compute_time_scales(millis).j2000_days_tt)
        eot = equation_of_time_deg(orbit.solar_longitude_deg, orbit.equation_of_center_deg)
        assert eot == pytest.approx(-5.18774, abs=2e-3)

    def test_equinox_reduces_to_equation_of_center(self):
        assert equation_of_time_deg(0.0, 3.0) == pytest.approx(-3.0, abs=1e-12)

    def test_bounded(self):
        """Mars' equation of time stays within about ±51 minutes (±13°)."""
        for dt in range(0, 687, 3):
            orbit = solve_mars_orbit(float(dt))
            eot = equation_of_time_deg(orbit.solar_longitude_deg, orbit.equation_of_center_deg)
            assert abs(eot) < 14.0


# ── Mars Year ─────────────────────────────────────────────────────

class TestMarsYear:

    def test_epoch_starts_year_zero(self):
        assert mars_year(MARS_YEAR_EPOCH_MILLIS) == 0

    def test_year_one_begins_one_mars_year_later(self):
        """Mars Year 1 begins 1955-04-11 (Clancy et al. 2000)."""
        assert mars_year(MARS_YEAR_EPOCH_MILLIS + MARS_MILLIS_PER_YEAR - 1) == 0
        assert mars_year(MARS_YEAR_EPOCH_MILLIS + MARS_MILLIS_PER_YEAR + 1) == 1
        assert mars_year(as_unix_millis(datetime(1955, 4, 12, tzinfo=timezone.utc))) == 1

    def test_worked_example_year(self):
        assert mars_year(as_unix_millis(_EXAMPLE)) == 24

    def test_spirit_landing_year(self):
        assert mars_year(as_unix_millis(_SPIRIT_LANDING)) == 26

    def test_before_epoch_is_negative(self):
        assert mars_year(MARS_YEAR_EPOCH_MILLIS - 1) == -1


# ── Stage result ──────────────────────────────────────────────────

class TestDeriveMarsClock:

    def test_worked_example(self):
        millis = as_unix_millis(_EXAMPLE)
        scales = compute_time_scales(millis)
        orbit = solve_mars_orbit(scales.j2000_days_tt)
        clock = derive_mars_clock(millis, scales, orbit)
        assert isinstance(clock, MarsClock)
        assert clock.mars_sol_date == pytest.approx(44795.99976, abs=1e-5)
        assert clock.mars_year == 24
        assert clock.mean_solar_time_hours == pytest.approx(23.99425, abs=1e-4)
        assert clock.equation_of_time_deg == pytest.approx(-5.18774, abs=2e-3)

    def test_frozen(self):
        clock = MarsClock(mars_sol_date=1.0, mars_year=1,
                          equation_of_time_deg=0.0, mean_solar_time_hours=0.0)
        with pytest.raises(AttributeError):
            clock.mars_year = 2  # type: ignore[misc]
