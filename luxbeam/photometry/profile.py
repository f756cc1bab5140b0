from __future__ import annotations

import math
from dataclasses import dataclass

from luxbeam.config import LightDefaults
from luxbeam.models.photometry import Photometry


@dataclass(frozen=True)
class LightProfile:
    cone_half_angle: float  # radians
    distance: float
    penumbra: float
    decay: float
    from_photometry: bool

    @property
    def cone_half_angle_deg(self) -> float:
        return math.degrees(self.cone_half_angle)


def derive_light_profile(photometry: Photometry, defaults: LightDefaults = LightDefaults()) -> LightProfile:
    """
    Operating parameters for a light built from `photometry`.

    Each derived photometric field overrides its default independently, so a
    record missing only one field still contributes the other.
    """
    angle = photometry.beam_angle_rad if photometry.beam_angle_rad else defaults.angle_rad
    distance = photometry.suggested_distance if photometry.suggested_distance else defaults.distance
    has_data = not photometry.is_empty
    return LightProfile(
        cone_half_angle=float(angle),
        distance=float(distance),
        penumbra=defaults.photometric_penumbra if has_data else defaults.penumbra,
        decay=defaults.decay,
        from_photometry=has_data,
    )
