"""
Sun and moon motion.

Both bodies ride the same vertical circle. The sun rises on the east
horizon at dawn (0.25), peaks at noon (0.5) and sets at dusk (0.75); the moon
is always on the opposite side of the circle.
"""

import math
from dataclasses import dataclass

from skycycle.config import CELESTIAL_DISTANCE, CELESTIAL_HEIGHT, VISIBILITY_THRESHOLD


@dataclass(frozen=True)
class CelestialState:
    """Snapshot of one body for a single tick."""

    angle: float
    position: tuple[float, float, float]
    magnitude: float  # max(0, sin(angle)), how far above the horizon
    visible: bool


@dataclass(frozen=True)
class GlowProfile:
    """
    Maps visibility magnitude to material values.

    emissive = emissive_base + emissive_gain * magnitude
    opacity  = opacity_gain * magnitude
    """

    emissive_base: float
    emissive_gain: float
    opacity_gain: float

    def emissive(self, magnitude: float) -> float:
        return self.emissive_base + self.emissive_gain * magnitude

    def opacity(self, magnitude: float) -> float:
        return self.opacity_gain * magnitude


SUN_GLOW = GlowProfile(emissive_base=1.2, emissive_gain=0.8, opacity_gain=0.6)
MOON_GLOW = GlowProfile(emissive_base=0.8, emissive_gain=1.0, opacity_gain=0.5)


def sun_angle(time_of_day: float) -> float:
    """Sun angle in radians; 0 is the east horizon, reached at dawn."""
    return time_of_day * 2 * math.pi - math.pi / 2


def moon_angle(time_of_day: float) -> float:
    return sun_angle(time_of_day) + math.pi


def body_state(
    angle: float,
    distance: float = CELESTIAL_DISTANCE,
    height: float = CELESTIAL_HEIGHT,
    threshold: float = VISIBILITY_THRESHOLD,
) -> CelestialState:
    """
    Place a body on its orbit and decide whether it is shown.

    The threshold keeps a body hidden while it hugs the horizon, so it does
    not flicker in and out exactly at sunrise/sunset.
    """
    position = (
        math.cos(angle) * distance,
        math.sin(angle) * distance + height,
        0.0,
    )
    magnitude = max(0.0, math.sin(angle))
    return CelestialState(
        angle=angle,
        position=position,
        magnitude=magnitude,
        visible=magnitude > threshold,
    )


def celestial_states(
    time_of_day: float,
    distance: float = CELESTIAL_DISTANCE,
    height: float = CELESTIAL_HEIGHT,
    threshold: float = VISIBILITY_THRESHOLD,
) -> tuple[CelestialState, CelestialState]:
    """
    Compute sun and moon for the given time of day.

    Returns:
        (sun, moon) snapshots derived from one shared angle
    """
    angle = sun_angle(time_of_day)
    sun = body_state(angle, distance, height, threshold)
    moon = body_state(angle + math.pi, distance, height, threshold)
    return sun, moon
