"""
Phase tables for the day-night cycle.

Every environmental channel (sky color, ambient, sun, moon and street light
intensity) is described by four anchor values, one per named phase. The
phases sit at fixed positions of the cycle and form a closed loop:

    night (0.0) -> dawn (0.25) -> day (0.5) -> dusk (0.75) -> night (1.0)
"""

from pydantic import BaseModel, Field

from skycycle.lighting_math import lerp


PHASES: tuple[str, ...] = ("night", "dawn", "day", "dusk")
PHASE_WIDTH: float = 1.0 / len(PHASES)


# ============================================================================
# Data Structures
# ============================================================================

class Color(BaseModel):
    """Linear RGB color with float components in [0.0, 1.0]."""
    r: float = Field(..., ge=0.0, le=1.0, description="Red component (0.0-1.0)")
    g: float = Field(..., ge=0.0, le=1.0, description="Green component (0.0-1.0)")
    b: float = Field(..., ge=0.0, le=1.0, description="Blue component (0.0-1.0)")

    class Config:
        frozen = True  # Make immutable for hashing

    @classmethod
    def from_hex(cls, value: int | str) -> "Color":
        """
        Build a color from a 24-bit hex value.

        Example:
            Color.from_hex(0x87ceeb) == Color.from_hex("#87ceeb")
        """
        if isinstance(value, str):
            value = int(value.lstrip("#"), 16)
        if not 0 <= value <= 0xFFFFFF:
            raise ValueError(f"Hex color out of range: {value:#x}")
        return cls(
            r=((value >> 16) & 0xFF) / 255,
            g=((value >> 8) & 0xFF) / 255,
            b=(value & 0xFF) / 255,
        )

    def to_hex(self) -> str:
        r, g, b = (round(c * 255) for c in (self.r, self.g, self.b))
        return f"#{r:02x}{g:02x}{b:02x}"

    def lerp(self, other: "Color", t: float) -> "Color":
        """Componentwise linear blend towards `other`."""
        r, g, b = (
            lerp(a, c, t)
            for a, c in ((self.r, other.r), (self.g, other.g), (self.b, other.b))
        )

        # Clamp to valid range
        return Color(
            r=max(0.0, min(1.0, r)),
            g=max(0.0, min(1.0, g)),
            b=max(0.0, min(1.0, b)),
        )


class _PhaseTable(BaseModel):
    """Shared accessors for the four-anchor tables."""

    class Config:
        frozen = True

    def anchors(self) -> tuple:
        """Anchor values in cycle order (night, dawn, day, dusk)."""
        return tuple(getattr(self, phase) for phase in PHASES)

    def anchor(self, phase: str):
        if phase not in PHASES:
            raise KeyError(f"Unknown phase: {phase}. Must be one of: {', '.join(PHASES)}")
        return getattr(self, phase)


class ColorPhaseTable(_PhaseTable):
    """Color anchors for the sky background."""
    night: Color
    dawn: Color
    day: Color
    dusk: Color


class ScalarPhaseTable(_PhaseTable):
    """Light intensity anchors."""
    night: float = Field(..., ge=0.0)
    dawn: float = Field(..., ge=0.0)
    day: float = Field(..., ge=0.0)
    dusk: float = Field(..., ge=0.0)


class CyclePalette(BaseModel):
    """Complete set of channel tables driving one scene."""
    sky: ColorPhaseTable
    ambient: ScalarPhaseTable = Field(..., description="Ambient light intensity")
    sun: ScalarPhaseTable = Field(..., description="Sun directional light intensity")
    moon: ScalarPhaseTable = Field(..., description="Moon directional light intensity")
    street: ScalarPhaseTable = Field(..., description="Shared street lamp intensity")

    class Config:
        frozen = True


# ============================================================================
# Default Palette
# ============================================================================

DEFAULT_PALETTE = CyclePalette(
    sky=ColorPhaseTable(
        night=Color.from_hex(0x0A0A2A),  # Deep navy
        dawn=Color.from_hex(0xFF6B35),   # Orange
        day=Color.from_hex(0x87CEEB),    # Sky blue
        dusk=Color.from_hex(0xFF4500),   # Orange red
    ),
    ambient=ScalarPhaseTable(night=0.1, dawn=0.3, day=0.8, dusk=0.4),
    sun=ScalarPhaseTable(night=0.05, dawn=0.8, day=2.5, dusk=1.2),
    moon=ScalarPhaseTable(night=0.8, dawn=0.3, day=0.0, dusk=0.4),
    street=ScalarPhaseTable(night=15.0, dawn=8.0, day=2.0, dusk=10.0),
)
