# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Named surface sites: lander positions and touchdown times.

Coordinates are planetographic latitude and west longitude, matching the
convention of the local-time functions.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class SurfaceSite:
    """A point on the Martian surface, optionally with a landing time."""
    name: str
    latitude_deg: float
    longitude_west_deg: float
    landing_utc: Optional[datetime] = None


LANDING_SITES: dict[str, SurfaceSite] = {
    "spirit": SurfaceSite(
        name="Spirit (MER-A)",
        latitude_deg=-14.5684,
        longitude_west_deg=184.702,
        landing_utc=datetime(2004, 1, 4, 4, 35, tzinfo=timezone.utc),
    ),
    "opportunity": SurfaceSite(
        name="Opportunity (MER-B)",
        latitude_deg=-1.9462,
        longitude_west_deg=5.5266,
        landing_utc=datetime(2004, 1, 25, 5, 5, tzinfo=timezone.utc),
    ),
    "curiosity": SurfaceSite(
        name="Curiosity (MSL)",
        latitude_deg=-4.5895,
        longitude_west_deg=222.5583,
        landing_utc=datetime(2012, 8, 6, 5, 17, 57, tzinfo=timezone.utc),
    ),
    "perseverance": SurfaceSite(
        name="Perseverance (M2020)",
        latitude_deg=18.4447,
        longitude_west_deg=282.5491,
        landing_utc=datetime(2021, 2, 18, 20, 55, tzinfo=timezone.utc),
    ),
}


def get_site(name: str) -> SurfaceSite:
    """Look up a landing site by key, case-insensitively."""
    try:
        return LANDING_SITES[name.strip().lower()]
    except KeyError:
        raise KeyError(
            f"Unknown site {name!r}; known sites: {', '.join(sorted(LANDING_SITES))}"
        ) from None
