"""
Scene objects written by the cycle controller.

These are headless stand-ins for renderer objects (lights, materials, meshes,
the scene background). The controller only assigns plain attributes, so any
renderer object exposing the same attributes can be bound instead.
"""

from dataclasses import dataclass, field
from typing import Optional

from skycycle.phase_table import Color
from skycycle.logger import get_logger

logger = get_logger("scene")

# Street lamp (x, z) positions of the park layout
STREET_LAMP_POSITIONS: list[tuple[float, float]] = [
    (-10.0, 5.0), (-4.0, 3.7), (5.0, 3.7), (4.5, -9.0),
    (-7.0, -9.0), (8.4, 10.0), (10.0, -3.5),
]
STREET_LAMP_HEIGHT: float = 2.2


@dataclass
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def set(self, x: float, y: float, z: float) -> "Vector3":
        self.x, self.y, self.z = x, y, z
        return self

    def copy(self, other: "Vector3") -> "Vector3":
        return self.set(other.x, other.y, other.z)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass
class Light:
    name: str
    intensity: float = 1.0
    position: Vector3 = field(default_factory=Vector3)


@dataclass
class Material:
    name: str
    emissive_intensity: float = 1.0
    opacity: float = 1.0


@dataclass
class CelestialMesh:
    """Sun or moon sphere with its surrounding glow shell."""

    name: str
    material: Material
    glow_material: Material
    position: Vector3 = field(default_factory=Vector3)
    visible: bool = True


@dataclass
class Scene:
    background: Optional[Color] = None


@dataclass
class SceneBindings:
    """
    References to the scene objects driven by the day-night cycle.

    The controller writes into these objects but does not own them.
    """

    scene: Scene
    ambient_light: Light
    sun: CelestialMesh
    sun_light: Light
    moon: CelestialMesh
    moon_light: Light
    street_lights: list[Light] = field(default_factory=list)


def build_scene(
    street_light_positions: list[tuple[float, float]] = STREET_LAMP_POSITIONS,
) -> SceneBindings:
    """
    Create the default light rig.

    Args:
        street_light_positions: (x, z) ground position of each street lamp

    Returns:
        SceneBindings with one point light per street lamp
    """
    street_lights = [
        Light(
            name=f"street_lamp_{i}",
            intensity=10.0,
            position=Vector3(x, STREET_LAMP_HEIGHT, z),
        )
        for i, (x, z) in enumerate(street_light_positions)
    ]

    bindings = SceneBindings(
        scene=Scene(),
        ambient_light=Light(name="ambient", intensity=0.4),
        sun=CelestialMesh(
            name="sun",
            material=Material(name="sun", emissive_intensity=1.2),
            glow_material=Material(name="sun_glow", opacity=0.6),
        ),
        sun_light=Light(name="sun_light", intensity=0.1, position=Vector3(0.0, 10.0, 0.0)),
        moon=CelestialMesh(
            name="moon",
            material=Material(name="moon", emissive_intensity=0.8),
            glow_material=Material(name="moon_glow", opacity=0.5),
        ),
        moon_light=Light(name="moon_light", intensity=1.0, position=Vector3(0.0, 10.0, 0.0)),
        street_lights=street_lights,
    )

    logger.info(f"Scene built with {len(street_lights)} street lights")
    return bindings
