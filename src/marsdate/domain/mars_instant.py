# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""MarsInstant value object: the Mars state of one Earth instant.

The whole Mars24 chain runs once at construction:

    time scales → orbit → calendar/clock → subsolar point → Earth-Mars geometry

and the stage results are kept as immutable fields. Longitude/latitude
queries (local times, Sun direction) are evaluated on demand from those
fields. Queries that compare against another instant take it explicitly;
nothing here reads the wall clock.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterator, Optional, Union

from marsdate.domain.earth_mars import (
    DistanceUnit,
    EarthMarsGeometry,
    compute_earth_mars_geometry,
    convert_distance,
)
from marsdate.domain.mars_calendar import (
    EARTH_DAYS_PER_SOL,
    MARS_SOLS_PER_YEAR,
    MarsClock,
    derive_mars_clock,
    local_mars_sol_date,
    mars_sol_date_of,
    sol_number,
)
from marsdate.domain.mars_orbit import MarsOrbit, solve_mars_orbit
from marsdate.domain.reference_data import ReferenceData, default_reference_data
from marsdate.domain.solar_geometry import (
    SubsolarPoint,
    compute_subsolar_point,
    local_mean_solar_time,
    local_true_solar_time,
    solar_azimuth_deg,
    solar_elevation_deg,
    solar_zenith_angle_deg,
)
from marsdate.domain.time_systems import (
    MILLIS_PER_DAY,
    TimeScales,
    as_unix_millis,
    compute_time_scales,
    unix_millis_to_datetime,
    utc_to_tt_seconds,
)

EarthInstant = Union[datetime, int, float, "MarsInstant"]


@dataclass(frozen=True)
class MarsInstant:
    """Mars calendar, clock and geometry for one Earth instant (UTC)."""

    earth_epoch_millis: int
    """Source instant, milliseconds since the Unix epoch."""

    time_scales: TimeScales
    orbit: MarsOrbit
    clock: MarsClock
    subsolar: SubsolarPoint
    earth_mars: EarthMarsGeometry
    reference: ReferenceData = field(repr=False, compare=False)

    # -- Construction ------------------------------------------------------- #

    @staticmethod
    def from_unix_millis(
        millis: int,
        reference: Optional[ReferenceData] = None,
    ) -> "MarsInstant":
        """Run the full pipeline for a Unix millisecond timestamp."""
        reference = reference or default_reference_data()
        millis = int(millis)
        time_scales = compute_time_scales(millis, reference)
        orbit = solve_mars_orbit(time_scales.j2000_days_tt, reference)
        clock = derive_mars_clock(millis, time_scales, orbit)
        return MarsInstant(
            earth_epoch_millis=millis,
            time_scales=time_scales,
            orbit=orbit,
            clock=clock,
            subsolar=compute_subsolar_point(clock, orbit),
            earth_mars=compute_earth_mars_geometry(millis, time_scales, orbit),
            reference=reference,
        )

    @staticmethod
    def from_datetime(
        dt: datetime,
        reference: Optional[ReferenceData] = None,
    ) -> "MarsInstant":
        """Build from a datetime. Naive datetimes are treated as UTC."""
        return MarsInstant.from_unix_millis(as_unix_millis(dt), reference)

    @staticmethod
    def from_instant(
        instant: EarthInstant,
        reference: Optional[ReferenceData] = None,
    ) -> "MarsInstant":
        if isinstance(instant, MarsInstant):
            return instant
        return MarsInstant.from_unix_millis(as_unix_millis(instant), reference)

    # -- Plain accessors ---------------------------------------------------- #

    @property
    def earth_datetime(self) -> datetime:
        return unix_millis_to_datetime(self.earth_epoch_millis)

    @property
    def mars_sol_date(self) -> float:
        return self.clock.mars_sol_date

    @property
    def julian_date_tt(self) -> float:
        return self.time_scales.julian_date_tt

    def calendar_year(self) -> int:
        """Mars Year (Clancy numbering)."""
        return self.clock.mars_year

    def solar_longitude(self) -> float:
        """Areocentric solar longitude Ls in [0, 360)."""
        return self.orbit.solar_longitude_deg

    def mean_solar_time(self) -> float:
        """Mean Solar Time at the prime meridian, hours in [0, 24)."""
        return self.clock.mean_solar_time_hours

    def sol_number(self) -> int:
        return sol_number(self.clock.mars_sol_date)

    def subsolar_longitude(self) -> float:
        return self.subsolar.longitude_deg

    def solar_declination(self) -> float:
        return self.subsolar.declination_deg

    # -- Local time --------------------------------------------------------- #

    def local_mean_solar_time(self, longitude_west_deg: float) -> float:
        return local_mean_solar_time(
            self.clock.mean_solar_time_hours, longitude_west_deg)

    def local_true_solar_time(self, longitude_west_deg: float) -> float:
        """LTST in hours; may fall slightly outside [0, 24) near midnight."""
        return local_true_solar_time(
            self.local_mean_solar_time(longitude_west_deg),
            self.clock.equation_of_time_deg,
        )

    # -- Sun direction ------------------------------------------------------ #

    def solar_zenith_angle(self, latitude_deg: float, longitude_west_deg: float) -> float:
        return solar_zenith_angle_deg(latitude_deg, longitude_west_deg, self.subsolar)

    def solar_elevation(self, latitude_deg: float, longitude_west_deg: float) -> float:
        return solar_elevation_deg(latitude_deg, longitude_west_deg, self.subsolar)

    def solar_azimuth(self, latitude_deg: float, longitude_west_deg: float) -> float:
        return solar_azimuth_deg(latitude_deg, longitude_west_deg, self.subsolar)

    # -- Distances ---------------------------------------------------------- #

    def heliocentric_distance(self, unit: DistanceUnit | str = DistanceUnit.AU) -> float:
        """Sun-Mars distance in AU or km."""
        return convert_distance(self.earth_mars.mars_distance_au, unit)

    def earth_mars_distance(self, unit: DistanceUnit | str = DistanceUnit.AU) -> float:
        """Earth-Mars distance in AU or km (coplanar approximation)."""
        return convert_distance(self.earth_mars.earth_mars_distance_au, unit)

    def light_delay_seconds(self) -> float:
        """One-way light time between Earth and Mars."""
        return self.earth_mars.light_delay_s

    # -- Comparisons with other instants ------------------------------------ #

    def _mars_sol_date_at(self, other: EarthInstant) -> float:
        if isinstance(other, MarsInstant):
            return other.clock.mars_sol_date
        return mars_sol_date_of(other, self.reference)

    @staticmethod
    def _millis_of(other: EarthInstant) -> int:
        if isinstance(other, MarsInstant):
            return other.earth_epoch_millis
        return as_unix_millis(other)

    def age_in_seconds(self, now: EarthInstant) -> float:
        """Earth seconds from this instant to ``now``; negative if ``now`` is earlier."""
        return (self._millis_of(now) - self.earth_epoch_millis) / 1000.0

    def age_in_sols(self, now: EarthInstant) -> float:
        return self._mars_sol_date_at(now) - self.clock.mars_sol_date

    def age_in_years(self, now: EarthInstant) -> float:
        """Age in Mars years of 668.5991 sols."""
        return self.age_in_sols(now) / MARS_SOLS_PER_YEAR

    def sol_of_mission(
        self,
        longitude_west_deg: float,
        landing: EarthInstant,
        first_sol: int = 0,
    ) -> int:
        """Mission sol at a landing site, counted in local mean solar days.

        The landing sol is ``first_sol`` (0 for MSL/M2020, 1 for MER).
        """
        here = local_mars_sol_date(self.clock.mars_sol_date, longitude_west_deg)
        touchdown = local_mars_sol_date(self._mars_sol_date_at(landing),
                                        longitude_west_deg)
        return math.floor(here) - math.floor(touchdown) + first_sol

    def anniversary(self, n: int) -> "MarsInstant":
        """The instant exactly ``n`` Mars years (in MSD) from this one.

        The Earth offset is corrected for any change in TT-UTC between the
        two instants so the sol count, not the UTC clock, advances by
        ``n`` years.
        """
        span_millis = n * MARS_SOLS_PER_YEAR * EARTH_DAYS_PER_SOL * MILLIS_PER_DAY
        shifted = self.earth_epoch_millis + span_millis
        tt_drift_s = (utc_to_tt_seconds(shifted, self.reference)
                      - self.time_scales.utc_to_tt_seconds)
        return MarsInstant.from_unix_millis(
            round(shifted - tt_drift_s * 1000.0), self.reference)

    def next_anniversary(self, now: EarthInstant) -> "MarsInstant":
        """First anniversary strictly after ``now``.

        For an instant still in the future of ``now`` this is the instant
        itself (the zeroth anniversary).
        """
        now_millis = self._millis_of(now)
        if self.earth_epoch_millis > now_millis:
            return self
        n = max(math.floor(self.age_in_years(now)) + 1, 1)
        while n > 1 and self.anniversary(n - 1).earth_epoch_millis > now_millis:
            n -= 1
        candidate = self.anniversary(n)
        while candidate.earth_epoch_millis <= now_millis:
            n += 1
            candidate = self.anniversary(n)
        return candidate


def timeline(
    start: datetime | int,
    end: datetime | int,
    step: timedelta,
    reference: Optional[ReferenceData] = None,
) -> Iterator[MarsInstant]:
    """MarsInstants from ``start`` to ``end`` inclusive at a fixed Earth step."""
    step_millis = step // timedelta(milliseconds=1)
    if step_millis <= 0:
        raise ValueError(f"Timeline step must be positive, got {step}")
    reference = reference or default_reference_data()
    millis = as_unix_millis(start)
    end_millis = as_unix_millis(end)
    while millis <= end_millis:
        yield MarsInstant.from_unix_millis(millis, reference)
        millis += step_millis
