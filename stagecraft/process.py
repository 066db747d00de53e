"""Small numeric helpers: clamping, wrapping, angle normalisation and lerps."""

from __future__ import annotations

import math

PI = math.pi
TAU = 2.0 * math.pi


def clamp(value, low, high):
    """Return ``value`` limited to ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def wrap(value, low, high):
    """Return ``high`` below the range, ``low`` above it, otherwise ``value``."""
    if value < low:
        return high
    if value > high:
        return low
    return value


def normalize_rot(value: float) -> float:
    """Bring an angle back into ``[-pi, pi]`` by one turn at most."""
    if value < -PI:
        return value + TAU
    if value > PI:
        return value - TAU
    return value


def normalize_diff_rot(diff: float, value: float) -> float:
    """Shift ``value`` by one turn so the step given by ``diff`` takes the short way."""
    if diff <= -PI:
        return value - TAU
    if diff >= PI:
        return value + TAU
    return value


def lerp_dest(dest, value, coef: float):
    """Move ``value`` towards ``dest`` by the fraction ``coef``."""
    return value + (dest - value) * coef


def lerp_diff(offset, diff, rate: float):
    """Return ``offset`` plus ``diff`` scaled by ``rate``."""
    return offset + diff * rate


def is_in_range(value, low, high) -> bool:
    """Return whether ``low <= value <= high``."""
    return low <= value <= high