"""
Mathematical helpers shared by the interpolation and celestial models.
"""

import math


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation."""
    return a + (b - a) * t


def wrap_unit(value: float) -> float:
    """
    Wrap a cyclic value into [0.0, 1.0).

    1.0 becomes 0.0, 1.3 becomes 0.3 and -0.25 becomes 0.75. Infinite and
    NaN values have no place on the cycle and map to 0.0; CycleConfig
    rejects them before they are stored.
    """
    if not math.isfinite(value):
        return 0.0

    wrapped = value % 1.0
    # -1e-18 % 1.0 rounds up to exactly 1.0
    if wrapped >= 1.0:
        return 0.0
    return wrapped
