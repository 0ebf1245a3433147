# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Earth time scales: Unix milliseconds → Julian Date (UT) → Terrestrial Time.

Implements steps A-1 to A-6 of the Mars24 algorithm (Allison & McEwen 2000).
From 1972-01-01 the UTC→TT offset comes from the IERS leap second table;
before that a polynomial fit to historical ΔT is used.
"""

import logging
from bisect import bisect_right
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from marsdate.domain.reference_data import (
    LeapSecond,
    ReferenceData,
    default_reference_data,
)

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Constants
# --------------------------------------------------------------------------- #

UNIX_EPOCH_JD: float = 2440587.5
"""Julian Date of 1970-01-01T00:00:00 UTC."""

J2000_JD: float = 2451545.0
"""Julian Date of the J2000.0 epoch."""

TT_TAI_OFFSET_S: float = 32.184
"""TT = TAI + 32.184 s (exact, IAU 1991)."""

MILLIS_PER_DAY: float = 86_400_000.0

SECONDS_PER_DAY: float = 86_400.0

DAYS_PER_JULIAN_CENTURY: float = 36525.0

LEAP_SECOND_ERA_START_MILLIS: int = 63_072_000_000
"""1972-01-01T00:00:00 UTC, first leap second insertion."""

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


# --------------------------------------------------------------------------- #
# Instant conversion
# --------------------------------------------------------------------------- #

def as_unix_millis(instant: datetime | int | float) -> int:
    """Milliseconds since the Unix epoch for a datetime or a millisecond count.

    Naive datetimes are treated as UTC.
    """
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        return (instant - _UNIX_EPOCH) // timedelta(milliseconds=1)
    return int(instant)


def unix_millis_to_datetime(millis: int) -> datetime:
    """UTC-aware datetime for a Unix millisecond count."""
    return _UNIX_EPOCH + timedelta(milliseconds=millis)


# --------------------------------------------------------------------------- #
# A-2 .. A-6
# --------------------------------------------------------------------------- #

def julian_date_ut(millis: float) -> float:
    """A-2: Julian Date (UT) from Unix milliseconds."""
    return UNIX_EPOCH_JD + millis / MILLIS_PER_DAY


def j2000_centuries_ut(jd_ut: float) -> float:
    """A-3: Julian centuries (UT) since J2000.0."""
    return (jd_ut - J2000_JD) / DAYS_PER_JULIAN_CENTURY


def tai_utc_seconds(millis: float, leap_seconds: tuple[LeapSecond, ...]) -> int:
    """TAI-UTC for the greatest tabulated epoch not after ``millis``.

    An instant exactly on a tabulated epoch takes that epoch's value.
    When no entry applies yet the last tabulated value is returned.
    """
    epochs = [entry.epoch_millis for entry in leap_seconds]
    index = bisect_right(epochs, millis) - 1
    if index < 0:
        logger.debug(
            "No leap second entry at or before %s ms; using last tabulated value",
            millis,
        )
        return leap_seconds[-1].tai_utc_s
    return leap_seconds[index].tai_utc_s


def _delta_t_polynomial(t_centuries: float) -> float:
    return (64.184
            + 59.0 * t_centuries
            - 51.2 * t_centuries ** 2
            - 67.1 * t_centuries ** 3
            - 16.4 * t_centuries ** 4)


def utc_to_tt_seconds(
    millis: float,
    reference: Optional[ReferenceData] = None,
) -> float:
    """A-4: TT - UTC in seconds.

    Leap second table plus 32.184 s on or after 1972-01-01; polynomial
    approximation in Julian centuries before it.
    """
    if millis >= LEAP_SECOND_ERA_START_MILLIS:
        table = (reference or default_reference_data()).leap_seconds
        return tai_utc_seconds(millis, table) + TT_TAI_OFFSET_S

    logger.debug("Instant %s ms predates 1972; using polynomial UTC-TT", millis)
    return _delta_t_polynomial(j2000_centuries_ut(julian_date_ut(millis)))


def julian_date_tt(jd_ut: float, tt_minus_utc_s: float) -> float:
    """A-5: Julian Date (TT)."""
    return jd_ut + tt_minus_utc_s / SECONDS_PER_DAY


def j2000_days_tt(jd_tt: float) -> float:
    """A-6: days (TT) since J2000.0."""
    return jd_tt - J2000_JD


# --------------------------------------------------------------------------- #
# Stage result
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class TimeScales:
    """Julian dates and J2000 offsets for one Earth instant."""
    julian_date_ut: float
    j2000_centuries_ut: float
    utc_to_tt_seconds: float
    julian_date_tt: float
    j2000_days_tt: float


def compute_time_scales(
    millis: float,
    reference: Optional[ReferenceData] = None,
) -> TimeScales:
    """Run steps A-2 to A-6 for one instant."""
    jd_ut = julian_date_ut(millis)
    tt_offset = utc_to_tt_seconds(millis, reference)
    jd_tt = julian_date_tt(jd_ut, tt_offset)
    return TimeScales(
        julian_date_ut=jd_ut,
        j2000_centuries_ut=j2000_centuries_ut(jd_ut),
        utc_to_tt_seconds=tt_offset,
        julian_date_tt=jd_tt,
        j2000_days_tt=j2000_days_tt(jd_tt),
    )
