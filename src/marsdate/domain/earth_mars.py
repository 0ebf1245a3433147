# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Heliocentric geometry of Earth and Mars and the one-way light time.

Mars distance and longitude follow Mars24 D-2/D-3. Earth uses a circular
mean-motion longitude anchored at 1996-08-25 and an elliptical distance
from the 2002-01-02 perihelion. Both orbits are treated as coplanar.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from marsdate.domain.angles import cos_deg, sin_deg, wrap_degrees
from marsdate.domain.mars_orbit import MarsOrbit
from marsdate.domain.time_systems import (
    MILLIS_PER_DAY,
    TimeScales,
    as_unix_millis,
)

AU_KM: float = 149_597_870.7
"""Astronomical unit in kilometres (IAU 2012)."""

SPEED_OF_LIGHT_M_S: float = 299_792_458.0

MARS_SEMI_MAJOR_AXIS_AU: float = 1.52367934

EARTH_SEMI_MAJOR_AXIS_AU: float = 1.00000011
EARTH_ECCENTRICITY: float = 0.01671022

_EARTH_DAILY_MOTION_DEG: float = 0.9855931
_EARTH_LONGITUDE_AT_EPOCH_DEG: float = 333.586
_EARTH_LONGITUDE_EPOCH_MILLIS: int = as_unix_millis(
    datetime(1996, 8, 25, tzinfo=timezone.utc))

_EARTH_PERIHELION_MILLIS: int = as_unix_millis(
    datetime(2002, 1, 2, 14, 9, tzinfo=timezone.utc))
_DAYS_PER_YEAR: float = 365.25


class DistanceUnit(Enum):
    AU = "AU"
    KM = "km"

    @classmethod
    def parse(cls, unit: "DistanceUnit | str") -> "DistanceUnit":
        if isinstance(unit, DistanceUnit):
            return unit
        for member in cls:
            if str(unit).strip().lower() == member.value.lower():
                return member
        raise ValueError(
            f"Unknown distance unit {unit!r}; expected one of "
            f"{', '.join(m.value for m in cls)}"
        )


def convert_distance(distance_au: float, unit: "DistanceUnit | str") -> float:
    """Express an AU distance in the requested unit."""
    if DistanceUnit.parse(unit) is DistanceUnit.KM:
        return distance_au * AU_KM
    return distance_au


@dataclass(frozen=True)
class EarthMarsGeometry:
    """Heliocentric positions of both planets and their separation."""
    mars_distance_au: float
    mars_longitude_deg: float
    earth_distance_au: float
    earth_longitude_deg: float
    separation_deg: float
    earth_mars_distance_au: float
    light_delay_s: float


def mars_heliocentric_distance_au(mean_anomaly: float) -> float:
    """D-2: Sun-Mars distance."""
    m = mean_anomaly
    return MARS_SEMI_MAJOR_AXIS_AU * (1.00436
                                      - 0.09309 * cos_deg(m)
                                      - 0.004336 * cos_deg(2.0 * m)
                                      - 0.00031 * cos_deg(3.0 * m)
                                      - 0.00003 * cos_deg(4.0 * m))


def mars_heliocentric_longitude_deg(solar_longitude: float, j2000_days_tt: float) -> float:
    """D-3: heliocentric longitude of Mars, [0, 360)."""
    ls = solar_longitude
    return wrap_degrees(ls + 85.061
                        - 0.015 * sin_deg(71.0 + 2.0 * ls)
                        - 5.5e-6 * j2000_days_tt)


def earth_heliocentric_longitude_deg(millis: float) -> float:
    """Earth's heliocentric longitude from mean daily motion, [0, 360)."""
    elapsed_days = (millis - _EARTH_LONGITUDE_EPOCH_MILLIS) / MILLIS_PER_DAY
    return wrap_degrees(_EARTH_DAILY_MOTION_DEG * elapsed_days
                        + _EARTH_LONGITUDE_AT_EPOCH_DEG)


def earth_heliocentric_distance_au(millis: float) -> float:
    """Sun-Earth distance on an ellipse, anomaly advancing uniformly from perihelion."""
    days_since_perihelion = (millis - _EARTH_PERIHELION_MILLIS) / MILLIS_PER_DAY
    true_anomaly = days_since_perihelion / _DAYS_PER_YEAR * 360.0
    e = EARTH_ECCENTRICITY
    return EARTH_SEMI_MAJOR_AXIS_AU * (1.0 - e * e) / (1.0 + e * cos_deg(true_anomaly))


def heliocentric_separation_deg(longitude_a: float, longitude_b: float) -> float:
    """Angle between two heliocentric longitudes, reduced to at most 180°."""
    diff = abs(longitude_a - longitude_b)
    return 360.0 - diff if diff > 180.0 else diff


def earth_mars_distance_au(
    earth_distance: float,
    mars_distance: float,
    separation_deg: float,
) -> float:
    """Law of cosines on the two heliocentric radii."""
    return math.sqrt(earth_distance ** 2 + mars_distance ** 2
                     - 2.0 * earth_distance * mars_distance * cos_deg(separation_deg))


def light_delay_seconds(distance_au: float) -> float:
    """One-way light travel time across ``distance_au``."""
    return distance_au * AU_KM * 1000.0 / SPEED_OF_LIGHT_M_S


def compute_earth_mars_geometry(
    millis: float,
    time_scales: TimeScales,
    orbit: MarsOrbit,
) -> EarthMarsGeometry:
    mars_r = mars_heliocentric_distance_au(orbit.mean_anomaly_deg)
    mars_lon = mars_heliocentric_longitude_deg(
        orbit.solar_longitude_deg, time_scales.j2000_days_tt)
    earth_r = earth_heliocentric_distance_au(millis)
    earth_lon = earth_heliocentric_longitude_deg(millis)
    separation = heliocentric_separation_deg(earth_lon, mars_lon)
    distance = earth_mars_distance_au(earth_r, mars_r, separation)
    return EarthMarsGeometry(
        mars_distance_au=mars_r,
        mars_longitude_deg=mars_lon,
        earth_distance_au=earth_r,
        earth_longitude_deg=earth_lon,
        separation_deg=separation,
        earth_mars_distance_au=distance,
        light_delay_s=light_delay_seconds(distance),
    )
