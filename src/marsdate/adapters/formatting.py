# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Presentation of MarsInstant values.

Clock strings, unit-converted distances and flat records for display and
export. Everything is derived from the instant on each call; the formatter
keeps no state besides its display options.
"""
import math
from dataclasses import dataclass
from typing import Any, Optional

from marsdate.domain.earth_mars import DistanceUnit
from marsdate.domain.mars_instant import MarsInstant
from marsdate.domain.sites import SurfaceSite


def format_clock(hours: float) -> str:
    """Render decimal hours as HH:MM:SS, truncating each component."""
    sign = "-" if hours < 0 else ""
    hours = abs(hours)
    hour = math.floor(hours)
    minutes_left = (hours - hour) * 60.0
    minute = math.floor(minutes_left)
    second = math.floor((minutes_left - minute) * 60.0)
    return f"{sign}{hour:02d}:{minute:02d}:{second:02d}"


@dataclass(frozen=True)
class MarsDateFormatter:
    """Formats MarsInstant quantities as strings.

    precision: decimal places for angles and distances.
    unit: distance unit for heliocentric and Earth-Mars distances.
    """
    precision: int = 4
    unit: DistanceUnit = DistanceUnit.AU

    def mean_solar_time(self, instant: MarsInstant) -> str:
        return format_clock(instant.mean_solar_time())

    def local_mean_solar_time(self, instant: MarsInstant, longitude_west_deg: float) -> str:
        return format_clock(instant.local_mean_solar_time(longitude_west_deg))

    def local_true_solar_time(self, instant: MarsInstant, longitude_west_deg: float) -> str:
        return format_clock(instant.local_true_solar_time(longitude_west_deg))

    def distance(self, distance: float) -> str:
        return f"{distance:.{self.precision}f} {self.unit.value}"

    def record(
        self,
        instant: MarsInstant,
        site: Optional[SurfaceSite] = None,
    ) -> dict[str, Any]:
        """Flat record of raw values, keyed for export."""
        row: dict[str, Any] = {
            "earth_utc": instant.earth_datetime.isoformat(),
            "earth_epoch_millis": instant.earth_epoch_millis,
            "mars_year": instant.calendar_year(),
            "mars_sol_date": instant.mars_sol_date,
            "solar_longitude_deg": instant.solar_longitude(),
            "mean_solar_time_h": instant.mean_solar_time(),
            "mean_solar_time": self.mean_solar_time(instant),
            "heliocentric_distance": instant.heliocentric_distance(self.unit),
            "earth_mars_distance": instant.earth_mars_distance(self.unit),
            "distance_unit": self.unit.value,
            "light_delay_s": instant.light_delay_seconds(),
        }
        if site is not None:
            lat, lon = site.latitude_deg, site.longitude_west_deg
            row.update({
                "site": site.name,
                "local_mean_solar_time": self.local_mean_solar_time(instant, lon),
                "local_true_solar_time": self.local_true_solar_time(instant, lon),
                "solar_elevation_deg": instant.solar_elevation(lat, lon),
                "solar_azimuth_deg": instant.solar_azimuth(lat, lon),
            })
            if site.landing_utc is not None:
                row["sol_of_mission"] = instant.sol_of_mission(lon, site.landing_utc)
        return row

    def summary(
        self,
        instant: MarsInstant,
        site: Optional[SurfaceSite] = None,
    ) -> dict[str, str]:
        """Human-readable labels and values for every public quantity."""
        p = self.precision
        lines = {
            "Earth UTC": instant.earth_datetime.isoformat(),
            "Mars Year": str(instant.calendar_year()),
            "Mars Sol Date": f"{instant.mars_sol_date:.5f}",
            "Solar longitude (Ls)": f"{instant.solar_longitude():.{p}f}°",
            "Mean Solar Time (MST)": self.mean_solar_time(instant),
            "Heliocentric distance": self.distance(
                instant.heliocentric_distance(self.unit)),
            "Earth-Mars distance": self.distance(
                instant.earth_mars_distance(self.unit)),
            "Light delay": (f"{instant.light_delay_seconds():.1f} s "
                            f"({format_clock(instant.light_delay_seconds() / 3600.0)})"),
        }
        if site is not None:
            lat, lon = site.latitude_deg, site.longitude_west_deg
            lines.update({
                "Site": f"{site.name} ({lat:.{p}f}°, {lon:.{p}f}°W)",
                "Local Mean Solar Time (LMST)": self.local_mean_solar_time(instant, lon),
                "Local True Solar Time (LTST)": self.local_true_solar_time(instant, lon),
                "Solar elevation": f"{instant.solar_elevation(lat, lon):.{p}f}°",
                "Solar azimuth": f"{instant.solar_azimuth(lat, lon):.{p}f}°",
            })
            if site.landing_utc is not None:
                lines["Sol of mission"] = str(
                    instant.sol_of_mission(lon, site.landing_utc))
        return lines
