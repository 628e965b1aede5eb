"""Shared numeric constants and small helpers."""

import math

PI: float = math.pi
"""The constant pi."""

TWO_PI: float = 2.0 * PI
"""The constant 2*pi."""

PI_OVER_2: float = 0.5 * PI
"""The constant pi/2."""

INFINITY: float = math.inf
"""Positive infinity."""

RAY_EPSILON: float = 0.001
"""Offset applied to ray positions and box bounds to avoid self-intersection."""

MIN_THICKNESS: float = 0.0001
"""Minimum thickness of a bounding box around flat shapes such as planes."""


def clamp(x: float, lower: float, upper: float) -> float:
    """Clamp ``x`` to ``[lower, upper]``; NaN passes through unchanged."""
    if x < lower:
        return lower
    if x > upper:
        return upper
    return x