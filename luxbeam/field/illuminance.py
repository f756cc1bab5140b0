"""
Illuminance heatmap model.

Point-by-point illuminance from a single spot light onto an upward facing
surface, compressed into a perceptual [0, 1] range and mapped onto a four
stop color ramp (blue, green, yellow, white).

The inverse square law, weighted by a soft cone edge and by the downward
component of the incident direction:

    E = I × cone(θ) × max(-ŷ·l, 0) / max(d², 0.5)

Where:
    I = light intensity (candela-equivalent)
    cone(θ) = smoothstep(cos α, cos α + 0.12, cos θ), α = cone half-angle
    l = unit vector from the light to the point
    d = distance from the light to the point

Points that receive no visible contribution return None.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from luxbeam.config import HeatmapSettings
from luxbeam.core.mathutils import clamp, smoothstep, smoothstep_array
from luxbeam.core.vector import Vector3
from luxbeam.models.color import RGB
from luxbeam.models.field import FieldSample
from luxbeam.models.light import LightPose


@dataclass(frozen=True)
class GradientStop:
    t: float
    color: RGB


GRADIENT_STOPS: Tuple[GradientStop, ...] = (
    GradientStop(0.0, RGB(0.0, 0.1, 0.7)),
    GradientStop(0.33, RGB(0.0, 0.65, 0.35)),
    GradientStop(0.66, RGB(0.95, 0.82, 0.15)),
    GradientStop(1.0, RGB(1.0, 1.0, 1.0)),
)

CONE_SOFT_EDGE = 0.12
MIN_CONE_STRENGTH = 0.001
MIN_DISTANCE_SQUARED = 0.5
MIN_REFERENCE_LUX = 1e-4
COMPRESSION_EXPONENT = 0.42
MAX_ALPHA = 0.85
MIN_ALPHA = 0.002


def heatmap_gradient(t: float) -> RGB:
    """Color ramp lookup; each segment blends with a smoothstep over its own span."""
    s0, s1, s2, s3 = GRADIENT_STOPS
    if t < s1.t:
        return s0.color.lerp(s1.color, smoothstep(s0.t, s1.t, t))
    if t < s2.t:
        return s1.color.lerp(s2.color, smoothstep(s1.t, s2.t, t))
    return s2.color.lerp(s3.color, smoothstep(s2.t, s3.t, t))


def _cone_strength(light_to_point: Vector3, light: LightPose) -> float:
    cos_half = math.cos(light.cone_half_angle)
    return smoothstep(cos_half, cos_half + CONE_SOFT_EDGE, light_to_point.dot(light.direction))


def illuminance_lux(point: Vector3, light: LightPose) -> float:
    """Illuminance at `point` in lux, ignoring any distance cutoff."""
    to_point = point - light.position
    distance = to_point.length()
    light_to_point = to_point / distance if distance > 0.0 else Vector3(0.0, 0.0, 0.0)
    cone = _cone_strength(light_to_point, light)
    if cone <= MIN_CONE_STRENGTH:
        return 0.0
    vertical = clamp(-light_to_point.y, 0.0, 1.0)
    return light.intensity * cone * vertical / max(distance * distance, MIN_DISTANCE_SQUARED)


def normalize_lux(lux: float, reference_lux: float) -> float:
    return clamp(math.pow(lux / max(reference_lux, MIN_REFERENCE_LUX), COMPRESSION_EXPONENT), 0.0, 1.0)


def evaluate_illuminance(
    point: Vector3,
    light: LightPose,
    reference_lux: float,
    max_distance: float,
) -> Optional[FieldSample]:
    to_point = point - light.position
    distance = to_point.length()
    if distance > max_distance:
        return None

    light_to_point = to_point / distance if distance > 0.0 else Vector3(0.0, 0.0, 0.0)
    cone = _cone_strength(light_to_point, light)
    if cone <= MIN_CONE_STRENGTH:
        return None

    vertical = clamp(-light_to_point.y, 0.0, 1.0)
    lux = light.intensity * cone * vertical / max(distance * distance, MIN_DISTANCE_SQUARED)
    # Negative intensities would make pow() complex; they read as no light.
    normalized = normalize_lux(max(lux, 0.0), reference_lux)
    alpha = normalized * MAX_ALPHA
    if alpha <= MIN_ALPHA:
        return None
    return FieldSample(color=heatmap_gradient(normalized), alpha=alpha)


@dataclass(frozen=True)
class HeatmapGrid:
    """
    Ground plane samples. Arrays are indexed [iz][ix].

    rgba holds zero alpha wherever evaluate_illuminance would return None.
    """
    xs: np.ndarray
    zs: np.ndarray
    height: float
    lux: np.ndarray
    rgba: np.ndarray

    @property
    def lit_fraction(self) -> float:
        if self.rgba.size == 0:
            return 0.0
        return float(np.count_nonzero(self.rgba[..., 3] > 0.0)) / float(self.rgba[..., 3].size)


def _gradient_array(t: np.ndarray) -> np.ndarray:
    s0, s1, s2, s3 = GRADIENT_STOPS
    c = [np.asarray(s.color.to_tuple(), dtype=float) for s in GRADIENT_STOPS]
    f0 = smoothstep_array(s0.t, s1.t, t)[..., None]
    f1 = smoothstep_array(s1.t, s2.t, t)[..., None]
    f2 = smoothstep_array(s2.t, s3.t, t)[..., None]
    seg0 = c[0] * (1.0 - f0) + c[1] * f0
    seg1 = c[1] * (1.0 - f1) + c[2] * f1
    seg2 = c[2] * (1.0 - f2) + c[3] * f2
    tt = t[..., None]
    return np.where(tt < s1.t, seg0, np.where(tt < s2.t, seg1, seg2))


def sample_heatmap_grid(
    light: LightPose,
    settings: HeatmapSettings,
    size: Optional[float] = None,
    resolution: Optional[int] = None,
    height: Optional[float] = None,
) -> HeatmapGrid:
    """
    Evaluate the heatmap over a square ground plane centred on the origin.

    The plane lies in x/z at `height`, with (resolution + 1)² sample points.
    Results agree with evaluate_illuminance point for point.
    """
    size = settings.size if size is None else float(size)
    resolution = settings.resolution if resolution is None else int(resolution)
    height = settings.height if height is None else float(height)
    n = max(int(resolution), 1) + 1

    xs = np.linspace(-size / 2.0, size / 2.0, n)
    zs = np.linspace(-size / 2.0, size / 2.0, n)
    X, Z = np.meshgrid(xs, zs)
    pos = light.position.to_array()
    d = np.stack([X - pos[0], np.full_like(X, height - pos[1]), Z - pos[2]], axis=-1)
    dist = np.linalg.norm(d, axis=-1)
    with np.errstate(invalid="ignore", divide="ignore"):
        l2p = np.where(dist[..., None] > 0.0, d / dist[..., None], 0.0)

    cos_half = math.cos(light.cone_half_angle)
    cone = smoothstep_array(cos_half, cos_half + CONE_SOFT_EDGE, l2p @ light.direction.to_array())
    vertical = np.clip(-l2p[..., 1], 0.0, 1.0)
    lux = light.intensity * cone * vertical / np.maximum(dist * dist, MIN_DISTANCE_SQUARED)

    in_field = (dist <= settings.max_distance) & (cone > MIN_CONE_STRENGTH)
    lux = np.where(in_field, np.maximum(lux, 0.0), 0.0)
    normalized = np.clip((lux / max(settings.reference_lux, MIN_REFERENCE_LUX)) ** COMPRESSION_EXPONENT, 0.0, 1.0)
    alpha = normalized * MAX_ALPHA
    visible = in_field & (alpha > MIN_ALPHA)

    rgba = np.zeros(X.shape + (4,), dtype=float)
    rgba[..., :3] = np.where(visible[..., None], _gradient_array(normalized), 0.0)
    rgba[..., 3] = np.where(visible, alpha, 0.0)
    return HeatmapGrid(xs=xs, zs=zs, height=height, lux=lux, rgba=rgba)


@dataclass
class HeatmapField:
    """
    Heatmap bound to a light. Produces nothing while disabled or without a light.
    """
    settings: HeatmapSettings = field(default_factory=HeatmapSettings)
    light: Optional[LightPose] = None

    @property
    def active(self) -> bool:
        return self.settings.enabled and self.light is not None

    def evaluate(self, point: Vector3) -> Optional[FieldSample]:
        light = self.light
        if not self.settings.enabled or light is None:
            return None
        return evaluate_illuminance(point, light, self.settings.reference_lux, self.settings.max_distance)

    def sample_grid(self) -> Optional[HeatmapGrid]:
        light = self.light
        if not self.settings.enabled or light is None:
            return None
        return sample_heatmap_grid(light, self.settings)
