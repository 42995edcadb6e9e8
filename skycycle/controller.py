"""
Day-night cycle controller.

Each tick:
1. Resolve the time of day (autoplay from wall clock, or the scrubbed value)
2. Compute one CycleFrame from the palette and the celestial model
3. Write the frame into the bound scene objects
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Optional

from skycycle.celestial import (
    MOON_GLOW,
    SUN_GLOW,
    CelestialState,
    GlowProfile,
    celestial_states,
)
from skycycle.config import CELESTIAL_DISTANCE, CELESTIAL_HEIGHT, VISIBILITY_THRESHOLD
from skycycle.interpolation import interpolate
from skycycle.lighting_math import wrap_unit
from skycycle.logger import get_logger
from skycycle.phase_table import DEFAULT_PALETTE, Color, CyclePalette
from skycycle.scene import CelestialMesh, Light, SceneBindings
from skycycle.state import CycleConfig

logger = get_logger("controller")


@dataclass(frozen=True)
class CycleFrame:
    """All channel values for one time of day."""

    time_of_day: float
    sky_color: Color
    ambient_intensity: float
    sun: CelestialState
    moon: CelestialState
    sun_intensity: float
    moon_intensity: float
    street_intensity: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "time_of_day": self.time_of_day,
            "sky_color": self.sky_color.to_hex(),
            "ambient_intensity": self.ambient_intensity,
            "sun": asdict(self.sun),
            "moon": asdict(self.moon),
            "sun_intensity": self.sun_intensity,
            "moon_intensity": self.moon_intensity,
            "street_intensity": self.street_intensity,
        }


class CycleController:
    """
    Drives the day-night cycle of one scene.

    Owns the CycleConfig and holds references to the scene objects it writes
    (sky background, ambient light, sun and moon meshes with their lights,
    street lights). The palette, orbit geometry, visibility threshold and
    glow profiles are fixed at construction.

    Only one thread may call tick(); other threads change the cycle through
    CycleConfig and see the result on the next tick.
    """

    def __init__(
        self,
        config: CycleConfig,
        bindings: SceneBindings,
        palette: CyclePalette = DEFAULT_PALETTE,
        celestial_distance: float = CELESTIAL_DISTANCE,
        celestial_height: float = CELESTIAL_HEIGHT,
        visibility_threshold: float = VISIBILITY_THRESHOLD,
        sun_glow: GlowProfile = SUN_GLOW,
        moon_glow: GlowProfile = MOON_GLOW,
    ):
        self.config = config
        self.bindings = bindings
        self.palette = palette
        self.celestial_distance = celestial_distance
        self.celestial_height = celestial_height
        self.visibility_threshold = visibility_threshold
        self.sun_glow = sun_glow
        self.moon_glow = moon_glow
        self.last_frame: Optional[CycleFrame] = None

        logger.info(
            f"Cycle controller ready: {config}, "
            f"street_lights={len(bindings.street_lights)}"
        )

    # -------------------------------------------------------------

    def resolve_time(self, wall_clock_seconds: float) -> float:
        """
        Decide the time of day for this tick.

        With autoplay on, the wall clock always wins and overwrites any value
        scrubbed in since the previous tick.
        """
        return self.config.advance(wall_clock_seconds)

    def compute_frame(self, time_of_day: float) -> CycleFrame:
        """Compute every channel for `time_of_day` without touching the scene."""
        t = wrap_unit(time_of_day)
        palette = self.palette

        sun, moon = celestial_states(
            t,
            distance=self.celestial_distance,
            height=self.celestial_height,
            threshold=self.visibility_threshold,
        )

        return CycleFrame(
            time_of_day=t,
            sky_color=interpolate(t, palette.sky),
            ambient_intensity=interpolate(t, palette.ambient),
            sun=sun,
            moon=moon,
            sun_intensity=interpolate(t, palette.sun),
            moon_intensity=interpolate(t, palette.moon),
            street_intensity=interpolate(t, palette.street),
        )

    def apply_frame(self, frame: CycleFrame) -> None:
        """Write a frame into the bound scene objects."""
        bindings = self.bindings

        bindings.scene.background = frame.sky_color
        bindings.ambient_light.intensity = frame.ambient_intensity

        self._apply_body(bindings.sun, bindings.sun_light, frame.sun, frame.sun_intensity, self.sun_glow)
        self._apply_body(bindings.moon, bindings.moon_light, frame.moon, frame.moon_intensity, self.moon_glow)

        # One shared signal for every lamp
        for light in bindings.street_lights:
            light.intensity = frame.street_intensity

    def tick(self, wall_clock_seconds: float) -> CycleFrame:
        """
        Advance the cycle by one rendered frame.

        Args:
            wall_clock_seconds: Monotonic time since the loop started

        Returns:
            The frame that was written to the scene
        """
        frame = self.compute_frame(self.resolve_time(wall_clock_seconds))
        self.apply_frame(frame)
        self.last_frame = frame

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Tick t={frame.time_of_day:.4f} sky={frame.sky_color.to_hex()} "
                f"sun_visible={frame.sun.visible} moon_visible={frame.moon.visible} "
                f"street={frame.street_intensity:.2f}",
                extra={"tick": True},
            )
        return frame

    # -------------------------------------------------------------

    @staticmethod
    def _apply_body(
        mesh: CelestialMesh,
        light: Light,
        state: CelestialState,
        intensity: float,
        glow: GlowProfile,
    ) -> None:
        mesh.position.set(*state.position)
        light.position.copy(mesh.position)

        # Driven continuously, even below the horizon
        light.intensity = intensity

        mesh.visible = state.visible
        if state.visible:
            mesh.material.emissive_intensity = glow.emissive(state.magnitude)
            mesh.glow_material.opacity = glow.opacity(state.magnitude)
