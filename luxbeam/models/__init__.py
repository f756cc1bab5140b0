from __future__ import annotations

from luxbeam.models.color import RGB
from luxbeam.models.field import BeamCoordinate, BeamGeometry, FieldSample
from luxbeam.models.light import LightPose, VolumetricParams
from luxbeam.models.photometry import EMPTY_PHOTOMETRY, Photometry

__all__ = [
    "RGB",
    "BeamCoordinate",
    "BeamGeometry",
    "FieldSample",
    "LightPose",
    "VolumetricParams",
    "EMPTY_PHOTOMETRY",
    "Photometry",
]
