"""
marsdate

Convert Earth instants into Mars calendar and clock values: Mars Year,
Mars Sol Date, areocentric solar longitude, mean and true local solar
time, Sun elevation and azimuth at any surface point, and the Earth-Mars
distance and one-way light delay. Based on the Mars24 algorithm of
Allison & McEwen (2000).
"""

__version__ = "1.0.0"

from marsdate.domain.reference_data import (
    LeapSecond,
    Perturber,
    ReferenceData,
    default_reference_data,
    load_reference_data,
    with_leap_second,
)
from marsdate.domain.time_systems import (
    TimeScales,
    as_unix_millis,
    compute_time_scales,
    unix_millis_to_datetime,
    utc_to_tt_seconds,
)
from marsdate.domain.mars_orbit import (
    MarsOrbit,
    solve_mars_orbit,
)
from marsdate.domain.mars_calendar import (
    MARS_SOLS_PER_YEAR,
    MARS_SECONDS_PER_SOL,
    MarsClock,
    mars_sol_date,
    mars_sol_date_of,
    mars_year,
)
from marsdate.domain.solar_geometry import (
    SubsolarPoint,
)
from marsdate.domain.earth_mars import (
    AU_KM,
    DistanceUnit,
    EarthMarsGeometry,
)
from marsdate.domain.sites import (
    LANDING_SITES,
    SurfaceSite,
    get_site,
)
from marsdate.domain.mars_instant import (
    MarsInstant,
    timeline,
)

__all__ = [
    "LeapSecond",
    "Perturber",
    "ReferenceData",
    "default_reference_data",
    "load_reference_data",
    "with_leap_second",
    "TimeScales",
    "as_unix_millis",
    "compute_time_scales",
    "unix_millis_to_datetime",
    "utc_to_tt_seconds",
    "MarsOrbit",
    "solve_mars_orbit",
    "MARS_SOLS_PER_YEAR",
    "MARS_SECONDS_PER_SOL",
    "MarsClock",
    "mars_sol_date",
    "mars_sol_date_of",
    "mars_year",
    "SubsolarPoint",
    "AU_KM",
    "DistanceUnit",
    "EarthMarsGeometry",
    "LANDING_SITES",
    "SurfaceSite",
    "get_site",
    "MarsInstant",
    "timeline",
]
