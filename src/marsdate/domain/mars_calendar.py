# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Mars calendar and prime-meridian clock.

Mars Sol Date (MSD), Mars Year, equation of time and Mean Solar Time at
the prime meridian (Airy Mean Time), per Mars24 steps C-1 and C-2.
Mars Years follow the Clancy et al. numbering: MARS_YEAR_EPOCH_MILLIS
opens Mars Year 0 and Mars Year 1 begins one Mars year later, 1955-04-11.
"""
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from marsdate.domain.angles import HOURS_PER_DAY, sin_deg, wrap_hours
from marsdate.domain.mars_orbit import MarsOrbit
from marsdate.domain.reference_data import ReferenceData
from marsdate.domain.time_systems import (
    TimeScales,
    as_unix_millis,
    compute_time_scales,
)

MARS_YEAR_EPOCH_MILLIS: int = -524_102_400_000
"""Start of Mars Year 0 (1953-05-24) in Unix milliseconds."""

MARS_SOLS_PER_YEAR: float = 668.5991

MARS_SECONDS_PER_SOL: float = 88775.244
"""24 h 39 min 35.244 s."""

MARS_MILLIS_PER_YEAR: float = MARS_SOLS_PER_YEAR * MARS_SECONDS_PER_SOL * 1000.0

EARTH_DAYS_PER_SOL: float = 1.0274912517
"""Sol length in Earth days, as used by the MSD definition."""

_MSD_JD_TT_ORIGIN: float = 2451549.5
_MSD_AT_ORIGIN: float = 44796.0 - 0.0009626


@dataclass(frozen=True)
class MarsClock:
    """Calendar and prime-meridian clock values at one instant."""
    mars_sol_date: float
    mars_year: int
    equation_of_time_deg: float
    mean_solar_time_hours: float


def mars_sol_date(julian_date_tt: float) -> float:
    """Mars Sol Date from Julian Date (TT)."""
    return (julian_date_tt - _MSD_JD_TT_ORIGIN) / EARTH_DAYS_PER_SOL + _MSD_AT_ORIGIN


def mean_solar_time_hours(msd: float) -> float:
    """C-2: Mean Solar Time at the prime meridian, in [0, 24)."""
    return wrap_hours(HOURS_PER_DAY * msd)


def equation_of_time_deg(solar_longitude: float, equation_of_center: float) -> float:
    """C-1: equation of time in degrees (divide by 15 for hours)."""
    ls = solar_longitude
    return (2.861 * sin_deg(2.0 * ls)
            - 0.071 * sin_deg(4.0 * ls)
            + 0.002 * sin_deg(6.0 * ls)
            - equation_of_center)


def mars_year(millis: float) -> int:
    """Mars Year containing the instant, counted from Mars Year 0 at the epoch."""
    return math.floor((millis - MARS_YEAR_EPOCH_MILLIS) / MARS_MILLIS_PER_YEAR)


def sol_number(msd: float) -> int:
    """Whole sols elapsed on the MSD count."""
    return math.floor(msd)


def local_mars_sol_date(msd: float, longitude_west_deg: float) -> float:
    """MSD shifted to local mean time at a west longitude."""
    return msd - longitude_west_deg / 360.0


def mars_sol_date_of(
    instant: datetime | int | float,
    reference: Optional[ReferenceData] = None,
) -> float:
    """Mars Sol Date for an arbitrary Earth instant."""
    millis = as_unix_millis(instant)
    return mars_sol_date(compute_time_scales(millis, reference).julian_date_tt)


def derive_mars_clock(
    millis: float,
    time_scales: TimeScales,
    orbit: MarsOrbit,
) -> MarsClock:
    msd = mars_sol_date(time_scales.julian_date_tt)
    return MarsClock(
        mars_sol_date=msd,
        mars_year=mars_year(millis),
        equation_of_time_deg=equation_of_time_deg(
            orbit.solar_longitude_deg, orbit.equation_of_center_deg),
        mean_solar_time_hours=mean_solar_time_hours(msd),
    )
