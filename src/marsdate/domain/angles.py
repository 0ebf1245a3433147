# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Degree-argument trigonometry and angle wrapping.

Every formula in the Mars24 chain is written in degrees; these helpers keep
the radian conversions in one place.
"""
import numpy as np

DEGREES_PER_CIRCLE: float = 360.0
HOURS_PER_DAY: float = 24.0


def sin_deg(angle_deg: float) -> float:
    return float(np.sin(np.radians(angle_deg)))


def cos_deg(angle_deg: float) -> float:
    return float(np.cos(np.radians(angle_deg)))


def tan_deg(angle_deg: float) -> float:
    return float(np.tan(np.radians(angle_deg)))


def asin_deg(value: float) -> float:
    """Arcsine in degrees. The argument is clipped into [-1, 1]."""
    return float(np.degrees(np.arcsin(np.clip(value, -1.0, 1.0))))


def acos_deg(value: float) -> float:
    """Arccosine in degrees. The argument is clipped into [-1, 1]."""
    return float(np.degrees(np.arccos(np.clip(value, -1.0, 1.0))))


def atan2_deg(y: float, x: float) -> float:
    return float(np.degrees(np.arctan2(y, x)))


def wrap(value: float, period: float) -> float:
    """Reduce value into [0, period).

    Python's float modulo can round a tiny negative value up to exactly
    ``period``; that case folds back to 0.0.
    """
    wrapped = value % period
    if wrapped >= period:
        return 0.0
    return wrapped


def wrap_degrees(angle_deg: float) -> float:
    """Normalize an angle into [0, 360)."""
    return wrap(angle_deg, DEGREES_PER_CIRCLE)


def wrap_hours(hours: float) -> float:
    """Normalize a clock reading into [0, 24)."""
    return wrap(hours, HOURS_PER_DAY)
