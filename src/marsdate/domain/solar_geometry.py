# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Local solar time and Sun direction at a point on the Martian surface.

Mars24 steps C-3 to C-5 and D-1, D-5, D-6. Longitudes are degrees west of
the prime meridian, latitudes planetographic degrees. Neither is range
checked: every formula is periodic in its angular arguments.
"""
from dataclasses import dataclass

from marsdate.domain.angles import (
    DEGREES_PER_CIRCLE,
    HOURS_PER_DAY,
    acos_deg,
    asin_deg,
    atan2_deg,
    cos_deg,
    sin_deg,
    tan_deg,
    wrap_degrees,
    wrap_hours,
)
from marsdate.domain.mars_calendar import MarsClock
from marsdate.domain.mars_orbit import MarsOrbit

_HOURS_PER_DEGREE: float = HOURS_PER_DAY / DEGREES_PER_CIRCLE


@dataclass(frozen=True)
class SubsolarPoint:
    """Planetographic position of the point with the Sun at zenith."""
    longitude_deg: float  # west, [0, 360)
    declination_deg: float


def local_mean_solar_time(mean_solar_time: float, longitude_west_deg: float) -> float:
    """C-3: LMST in hours, [0, 24) for any longitude."""
    return wrap_hours(mean_solar_time - longitude_west_deg * _HOURS_PER_DEGREE
                      + HOURS_PER_DAY)


def local_true_solar_time(local_mean: float, equation_of_time: float) -> float:
    """C-4: LTST in hours.

    Not re-wrapped after the equation-of-time correction, so values just
    below 0 or at/above 24 occur near local midnight.
    """
    return local_mean + equation_of_time * _HOURS_PER_DEGREE


def subsolar_longitude_deg(mean_solar_time: float, equation_of_time: float) -> float:
    """C-5: west longitude of the subsolar point, [0, 360)."""
    return wrap_degrees(mean_solar_time * 15.0 + equation_of_time + 180.0)


def solar_declination_deg(solar_longitude: float) -> float:
    """D-1: planetographic solar declination."""
    return (asin_deg(0.42565 * sin_deg(solar_longitude))
            + 0.25 * sin_deg(solar_longitude))


def solar_zenith_angle_deg(
    latitude_deg: float,
    longitude_west_deg: float,
    subsolar: SubsolarPoint,
) -> float:
    """D-5: angle between local vertical and the Sun, degrees."""
    decl = subsolar.declination_deg
    return acos_deg(
        sin_deg(decl) * sin_deg(latitude_deg)
        + cos_deg(decl) * cos_deg(latitude_deg)
        * cos_deg(longitude_west_deg - subsolar.longitude_deg)
    )


def solar_elevation_deg(
    latitude_deg: float,
    longitude_west_deg: float,
    subsolar: SubsolarPoint,
) -> float:
    """Sun elevation above the local horizon (90 - zenith angle)."""
    return 90.0 - solar_zenith_angle_deg(latitude_deg, longitude_west_deg, subsolar)


def solar_azimuth_deg(
    latitude_deg: float,
    longitude_west_deg: float,
    subsolar: SubsolarPoint,
) -> float:
    """D-6: compass azimuth of the Sun, clockwise from north, [0, 360)."""
    hour_angle = longitude_west_deg - subsolar.longitude_deg
    raw = atan2_deg(
        sin_deg(hour_angle),
        cos_deg(latitude_deg) * tan_deg(subsolar.declination_deg)
        - sin_deg(latitude_deg) * cos_deg(hour_angle),
    )
    return wrap_degrees(DEGREES_PER_CIRCLE + raw)


def compute_subsolar_point(clock: MarsClock, orbit: MarsOrbit) -> SubsolarPoint:
    return SubsolarPoint(
        longitude_deg=subsolar_longitude_deg(
            clock.mean_solar_time_hours, clock.equation_of_time_deg),
        declination_deg=solar_declination_deg(orbit.solar_longitude_deg),
    )
