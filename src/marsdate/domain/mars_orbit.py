# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Mars orbital position: mean anomaly, equation of center, solar longitude.

Steps B-1 to B-5 of the Mars24 algorithm. Input is the TT day offset from
J2000.0; all angles are in degrees.
"""
from dataclasses import dataclass
from typing import Optional

import numpy as np

from marsdate.domain.angles import sin_deg, wrap_degrees
from marsdate.domain.reference_data import (
    Perturber,
    ReferenceData,
    default_reference_data,
)

# Earth mean motion (deg/day) used to scale perturber periods from Julian years.
_PERTURBER_RATE_DEG_PER_DAY: float = 0.985626


@dataclass(frozen=True)
class MarsOrbit:
    """Orbital angles of Mars at one instant (degrees)."""
    mean_anomaly_deg: float
    fictitious_mean_sun_deg: float
    perturbation_sum_deg: float
    equation_of_center_deg: float
    solar_longitude_deg: float


def mean_anomaly_deg(j2000_days_tt: float) -> float:
    """B-1: Mars mean anomaly (not wrapped)."""
    return 19.3871 + 0.52402073 * j2000_days_tt


def fictitious_mean_sun_deg(j2000_days_tt: float) -> float:
    """B-2: angle of the Fictitious Mean Sun (not wrapped)."""
    return 270.3871 + 0.524038496 * j2000_days_tt


def perturbation_sum_deg(
    j2000_days_tt: float,
    perturbers: tuple[Perturber, ...],
) -> float:
    """B-3: sum of A·cos(0.985626°·Δt/τ + φ) over the perturber table."""
    if not perturbers:
        return 0.0
    amplitude = np.array([p.amplitude_deg for p in perturbers])
    period = np.array([p.period_years for p in perturbers])
    phase = np.array([p.phase_deg for p in perturbers])
    argument = _PERTURBER_RATE_DEG_PER_DAY * j2000_days_tt / period + phase
    return float(np.sum(amplitude * np.cos(np.radians(argument))))


def equation_of_center_deg(
    j2000_days_tt: float,
    mean_anomaly: float,
    perturbation_sum: float,
) -> float:
    """B-4: true anomaly minus mean anomaly (ν - M)."""
    m = mean_anomaly
    return ((10.691 + 3.0e-7 * j2000_days_tt) * sin_deg(m)
            + 0.623 * sin_deg(2.0 * m)
            + 0.050 * sin_deg(3.0 * m)
            + 0.005 * sin_deg(4.0 * m)
            + 0.0005 * sin_deg(5.0 * m)
            + perturbation_sum)


def areocentric_solar_longitude_deg(
    fictitious_mean_sun: float,
    equation_of_center: float,
) -> float:
    """B-5: Ls = αFMS + (ν - M), normalized into [0, 360)."""
    return wrap_degrees(fictitious_mean_sun + equation_of_center)


def solve_mars_orbit(
    j2000_days_tt: float,
    reference: Optional[ReferenceData] = None,
) -> MarsOrbit:
    """Run steps B-1 to B-5."""
    perturbers = (reference or default_reference_data()).perturbers
    m = mean_anomaly_deg(j2000_days_tt)
    afms = fictitious_mean_sun_deg(j2000_days_tt)
    pbs = perturbation_sum_deg(j2000_days_tt, perturbers)
    eoc = equation_of_center_deg(j2000_days_tt, m, pbs)
    return MarsOrbit(
        mean_anomaly_deg=m,
        fictitious_mean_sun_deg=afms,
        perturbation_sum_deg=pbs,
        equation_of_center_deg=eoc,
        solar_longitude_deg=areocentric_solar_longitude_deg(afms, eoc),
    )
