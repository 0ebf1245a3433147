# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Reference data for the Mars time chain: leap seconds and perturbers.

The tables ship as JSON under ``marsdate/data`` and are loaded once per
process. Updated IERS bulletins or revised perturber terms can be supplied
as alternative files, or a new leap second appended with
``with_leap_second``, without touching the algorithm.
"""
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent.parent / "data"
_TAI_UTC_PATH = _DATA_DIR / "tai_utc.json"
_MARS24_PATH = _DATA_DIR / "mars24.json"

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class LeapSecond:
    """TAI-UTC offset in effect from ``epoch_millis`` (UTC) onwards."""
    epoch_millis: int
    tai_utc_s: int


@dataclass(frozen=True)
class Perturber:
    """One periodic planetary perturbation term of the equation of center.

    amplitude_deg: A, in degrees.
    period_years: tau, in Julian years.
    phase_deg: phi, in degrees.
    """
    amplitude_deg: float
    period_years: float
    phase_deg: float


@dataclass(frozen=True)
class ReferenceData:
    """Versioned, read-only reference tables consumed by the pipeline."""
    version: str
    leap_seconds: tuple[LeapSecond, ...]
    perturbers: tuple[Perturber, ...]

    def __post_init__(self) -> None:
        if not self.leap_seconds:
            raise ValueError("Leap second table must not be empty")
        for prev, entry in zip(self.leap_seconds, self.leap_seconds[1:]):
            if entry.epoch_millis <= prev.epoch_millis:
                raise ValueError(
                    f"Leap second epochs must be strictly increasing: "
                    f"{entry.epoch_millis} follows {prev.epoch_millis}"
                )

    @property
    def leap_second_epochs(self) -> tuple[int, ...]:
        return tuple(entry.epoch_millis for entry in self.leap_seconds)


def _date_to_millis(date: str) -> int:
    parts = date.split("-")
    if len(parts) != 3:
        raise ValueError(f"Expected YYYY-MM-DD leap second date, got {date!r}")
    dt = datetime(int(parts[0]), int(parts[1]), int(parts[2]),
                  tzinfo=timezone.utc)
    return (dt - _UNIX_EPOCH) // timedelta(milliseconds=1)


def _read_leap_seconds(path: Path) -> tuple[LeapSecond, ...]:
    logger.debug("Loading leap second table from %s", path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return tuple(
        LeapSecond(
            epoch_millis=_date_to_millis(entry["date"]),
            tai_utc_s=int(entry["tai_utc"]),
        )
        for entry in data["entries"]
    )


def _read_mars24(path: Path) -> tuple[str, tuple[Perturber, ...]]:
    logger.debug("Loading Mars24 perturber table from %s", path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    perturbers = tuple(
        Perturber(
            amplitude_deg=float(term["amplitude_deg"]),
            period_years=float(term["period_years"]),
            phase_deg=float(term["phase_deg"]),
        )
        for term in data["perturbers"]
    )
    return str(data.get("version", "unversioned")), perturbers


def load_reference_data(
    tai_utc_path: Optional[str] = None,
    mars24_path: Optional[str] = None,
) -> ReferenceData:
    """Load reference tables from JSON files.

    Any path left as None falls back to the bundled file. Raises
    ValueError for malformed or unordered tables and FileNotFoundError
    for missing files.
    """
    try:
        leap_seconds = _read_leap_seconds(
            Path(tai_utc_path) if tai_utc_path else _TAI_UTC_PATH)
        version, perturbers = _read_mars24(
            Path(mars24_path) if mars24_path else _MARS24_PATH)
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed reference data: missing {e}") from e

    return ReferenceData(
        version=version,
        leap_seconds=leap_seconds,
        perturbers=perturbers,
    )


_DEFAULT_REFERENCE: Optional[ReferenceData] = None


def default_reference_data() -> ReferenceData:
    """Bundled reference data, loaded and cached on first use."""
    global _DEFAULT_REFERENCE
    if _DEFAULT_REFERENCE is None:
        _DEFAULT_REFERENCE = load_reference_data()
    return _DEFAULT_REFERENCE


def with_leap_second(
    reference: ReferenceData,
    epoch: datetime | int,
    tai_utc_s: int,
) -> ReferenceData:
    """Return a copy of ``reference`` with one leap second appended.

    ``epoch`` is a UTC datetime (naive treated as UTC) or Unix milliseconds.
    """
    if isinstance(epoch, datetime):
        if epoch.tzinfo is None:
            epoch = epoch.replace(tzinfo=timezone.utc)
        epoch_millis = (epoch - _UNIX_EPOCH) // timedelta(milliseconds=1)
    else:
        epoch_millis = int(epoch)

    return ReferenceData(
        version=f"{reference.version}+{epoch_millis}",
        leap_seconds=reference.leap_seconds
        + (LeapSecond(epoch_millis=epoch_millis, tai_utc_s=int(tai_utc_s)),),
        perturbers=reference.perturbers,
    )
