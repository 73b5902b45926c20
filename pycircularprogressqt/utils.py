from __future__ import annotations

import numpy as np


def clamp(value: float, vmin: float = 0.0, vmax: float = 1.0) -> float:
    """Clamp numeric values to [vmin, vmax]; non-numeric or NaN input gives vmin."""
    lo = float(vmin)
    hi = float(vmax)
    if lo > hi:
        lo, hi = hi, lo

    try:
        v = float(value)
    except (TypeError, ValueError):
        return lo

    if np.isnan(v):
        return lo

    return float(np.clip(v, lo, hi))


def radians_to_qt_degrees(angle: float) -> float:
    """Convert a model angle (y down, clockwise positive) to Qt arc degrees.

    Qt arc angles are counter-clockwise positive on screen.
    """
    return -float(np.degrees(angle))
