from __future__ import annotations

from luxbeam.field.illuminance import (
    GRADIENT_STOPS,
    HeatmapField,
    HeatmapGrid,
    evaluate_illuminance,
    heatmap_gradient,
    illuminance_lux,
    sample_heatmap_grid,
)
from luxbeam.field.volumetric import (
    beam_orientation,
    compute_beam_geometry,
    evaluate_volumetric,
    is_beam_visible,
    volumetric_strength,
)

__all__ = [
    "GRADIENT_STOPS",
    "HeatmapField",
    "HeatmapGrid",
    "evaluate_illuminance",
    "heatmap_gradient",
    "illuminance_lux",
    "sample_heatmap_grid",
    "beam_orientation",
    "compute_beam_geometry",
    "evaluate_volumetric",
    "is_beam_visible",
    "volumetric_strength",
]
