"""
Phase table interpolation.

One routine serves every channel, color or scalar, so all channels share the
same segment boundaries.
"""

from skycycle.lighting_math import lerp, wrap_unit
from skycycle.phase_table import PHASES, PHASE_WIDTH, Color


def locate_segment(time_of_day: float) -> tuple[int, float]:
    """
    Find the phase segment containing `time_of_day`.

    Returns:
        (index, factor) where index selects the starting phase in PHASES and
        factor is the local progress through the segment (0.0-1.0)

    Example:
        locate_segment(0.3)  # (1, 0.2) -> 20% of the way from dawn to day
    """
    t = wrap_unit(time_of_day)
    index = min(int(t / PHASE_WIDTH), len(PHASES) - 1)
    factor = (t - index * PHASE_WIDTH) / PHASE_WIDTH
    return index, factor


def interpolate(time_of_day: float, table):
    """
    Interpolate a phase table at the given time of day.

    Args:
        time_of_day: Cycle position, wrapped into [0.0, 1.0) before lookup
        table: ColorPhaseTable or ScalarPhaseTable

    Returns:
        Color for color tables, float for scalar tables

    Algorithm:
        1. Select the segment (night->dawn, dawn->day, day->dusk, dusk->night)
        2. Blend the segment's two anchors by the local factor

    Dusk blends back into night, so the cycle closes without a seam.
    """
    anchors = table.anchors()
    index, factor = locate_segment(time_of_day)

    start = anchors[index]
    end = anchors[(index + 1) % len(anchors)]

    if isinstance(start, Color):
        return start.lerp(end, factor)
    return lerp(start, end, factor)
