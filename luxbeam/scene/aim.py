from __future__ import annotations

import math
from dataclasses import dataclass

from luxbeam.core.vector import Vector3
from luxbeam.models.light import LightPose


MIN_TARGET_DISTANCE = 0.5
HORIZONTAL_TARGET_DISTANCE = 10.0
UPWARD_TARGET_DISTANCE = 3.0
MIN_LIGHT_DISTANCE = 5.0
LIGHT_DISTANCE_MARGIN = 1.2


@dataclass(frozen=True)
class AimResult:
    target: Vector3
    distance: float
    light_distance: float


def direction_from_yaw_pitch(yaw_deg: float, pitch_deg: float) -> Vector3:
    """
    Aim vector for yaw about +y (0 faces +z) and pitch above the horizon
    (-90 points straight down).
    """
    yaw = math.radians(yaw_deg)
    pitch = math.radians(pitch_deg)
    cos_pitch = math.cos(pitch)
    return Vector3(
        math.sin(yaw) * cos_pitch,
        math.sin(pitch),
        math.cos(yaw) * cos_pitch,
    ).normalize(fallback=Vector3.down())


def compute_target_distance(origin: Vector3, direction: Vector3) -> float:
    # Downward aims hit the floor plane y=0; other aims use fixed throws.
    if direction.y < -0.0001:
        distance = origin.y / -direction.y
    elif abs(direction.y) < 0.0001:
        distance = HORIZONTAL_TARGET_DISTANCE
    else:
        distance = UPWARD_TARGET_DISTANCE
    return max(distance, MIN_TARGET_DISTANCE)


def aim_light(light: LightPose, yaw_deg: float, pitch_deg: float) -> AimResult:
    """Point `light` along yaw/pitch (mutates light.direction) and return where it lands."""
    direction = direction_from_yaw_pitch(yaw_deg, pitch_deg)
    distance = compute_target_distance(light.position, direction)
    light.direction = direction
    return AimResult(
        target=light.position + direction * distance,
        distance=distance,
        light_distance=max(distance * LIGHT_DISTANCE_MARGIN, MIN_LIGHT_DISTANCE),
    )
