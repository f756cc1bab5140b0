from __future__ import annotations

import math
from dataclasses import dataclass, field

from luxbeam.core.vector import Vector3
from luxbeam.models.color import RGB


@dataclass
class LightPose:
    """
    A placed light as the field models see it.

    Attributes:
        position: World position of the fixture (y up)
        direction: Unit aim vector
        cone_half_angle: Beam half-angle in radians
        intensity: Candela-equivalent output at the reference distance
        color: Light color, usually from kelvin_to_rgb
    """
    position: Vector3 = field(default_factory=lambda: Vector3(0.0, 3.0, 0.0))
    direction: Vector3 = field(default_factory=Vector3.down)
    cone_half_angle: float = math.radians(38.0)
    intensity: float = 1500.0
    color: RGB = field(default_factory=RGB.white)

    def __post_init__(self):
        self.direction = self.direction.normalize(fallback=Vector3.down())


@dataclass(frozen=True)
class VolumetricParams:
    opacity: float = 1.0
    attenuation: float = 1.0  # decay length along the beam axis, in unit beam heights
    noise: float = 0.0
