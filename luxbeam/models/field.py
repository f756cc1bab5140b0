from __future__ import annotations

from dataclasses import dataclass

from luxbeam.models.color import RGB


@dataclass(frozen=True)
class FieldSample:
    """Color and opacity contributed by a light at one queried point."""
    color: RGB
    alpha: float


@dataclass(frozen=True)
class BeamGeometry:
    radius: float
    length: float


@dataclass(frozen=True)
class BeamCoordinate:
    """
    Point inside the unit beam cone.

    height: 0 at the apex (the fixture), 1 at the cone base.
    radial: distance from the beam axis, 1 on the lateral surface.
    """
    height: float
    radial: float
