from __future__ import annotations

from luxbeam.color.kelvin import kelvin_to_rgb
from luxbeam.config import HeatmapSettings, LightDefaults, ViewerConfig, load_config
from luxbeam.core.vector import Vector3
from luxbeam.field.illuminance import HeatmapField, evaluate_illuminance, sample_heatmap_grid
from luxbeam.field.volumetric import compute_beam_geometry, evaluate_volumetric, is_beam_visible
from luxbeam.models import (
    EMPTY_PHOTOMETRY,
    RGB,
    BeamCoordinate,
    BeamGeometry,
    FieldSample,
    LightPose,
    Photometry,
    VolumetricParams,
)
from luxbeam.parser.ies_parser import parse_ies_photometry
from luxbeam.photometry.profile import LightProfile, derive_light_profile

__version__ = "0.1.0"

__all__ = [
    "kelvin_to_rgb",
    "HeatmapSettings",
    "LightDefaults",
    "ViewerConfig",
    "load_config",
    "Vector3",
    "HeatmapField",
    "evaluate_illuminance",
    "sample_heatmap_grid",
    "compute_beam_geometry",
    "evaluate_volumetric",
    "is_beam_visible",
    "EMPTY_PHOTOMETRY",
    "RGB",
    "BeamCoordinate",
    "BeamGeometry",
    "FieldSample",
    "LightPose",
    "Photometry",
    "VolumetricParams",
    "parse_ies_photometry",
    "LightProfile",
    "derive_light_profile",
]
