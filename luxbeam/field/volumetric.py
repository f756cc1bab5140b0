"""
Volumetric beam model.

The beam is a cone with its apex at the fixture, opening with the light's
cone half-angle and reaching the aim target. Shading is evaluated in the
cone's local coordinates (see BeamCoordinate): density fades towards the
lateral surface and the apex, decays exponentially along the axis, and is
scaled by how bright and how narrow the light is.
"""

from __future__ import annotations

import math
from typing import Optional

from luxbeam.core.mathutils import clamp, mix, smoothstep
from luxbeam.core.vector import Vector3
from luxbeam.models.field import BeamCoordinate, BeamGeometry, FieldSample
from luxbeam.models.light import LightPose, VolumetricParams


MIN_BEAM_LENGTH = 0.25
MIN_BEAM_RADIUS = 0.05
REFERENCE_CANDELA = 1500.0
MAX_INTENSITY_FACTOR = 12.0
MIN_ALPHA = 0.002
VISIBILITY_THRESHOLD = 0.001
MIN_ATTENUATION = 1e-6


def compute_beam_geometry(light: LightPose, target: Vector3) -> BeamGeometry:
    length = max((target - light.position).length(), MIN_BEAM_LENGTH)
    radius = max(math.tan(light.cone_half_angle) * length, MIN_BEAM_RADIUS)
    return BeamGeometry(radius=radius, length=length)


def beam_orientation(light: LightPose, target: Vector3) -> Vector3:
    """Unit axis from the fixture towards `target`; straight down when they coincide."""
    return (target - light.position).normalize(fallback=Vector3.down())


def volumetric_strength(light: LightPose) -> float:
    """Overall beam density: brighter and narrower beams read denser."""
    intensity_factor = clamp(light.intensity / REFERENCE_CANDELA, 0.0, MAX_INTENSITY_FACTOR)
    half_pi = math.pi / 2.0
    spread_factor = clamp((half_pi - light.cone_half_angle) / half_pi + 0.35, 0.25, 1.6)
    return intensity_factor * spread_factor


def is_beam_visible(light: LightPose) -> bool:
    return volumetric_strength(light) > VISIBILITY_THRESHOLD


def evaluate_volumetric(
    local: BeamCoordinate,
    light: LightPose,
    params: VolumetricParams,
) -> Optional[FieldSample]:
    height = local.height
    radial = local.radial

    rim = smoothstep(0.5, 1.0, radial)
    axial = math.pow(clamp(height, 0.0, 1.0), 1.2)
    falloff = math.exp(-clamp(height, 0.0, 1.0) / max(params.attenuation, MIN_ATTENUATION))
    body = (1.0 - rim) * axial * falloff

    strength = volumetric_strength(light)
    alpha = clamp(body * strength * params.opacity, 0.0, 1.0)

    if params.noise > 0.001:
        # Deterministic banding; identical inputs always give identical output.
        noise_sample = math.sin(radial * 25.0 + height * 12.0) * 0.5 + 0.5
        alpha *= mix(1.0, noise_sample, clamp(params.noise, 0.0, 1.0))

    if alpha <= MIN_ALPHA:
        return None

    color = light.color.scale((0.55 + 0.45 * (1.0 - height)) * (strength * params.opacity))
    return FieldSample(color=color, alpha=alpha)
