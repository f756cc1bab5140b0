from __future__ import annotations

from luxbeam.scene.aim import AimResult, aim_light, compute_target_distance, direction_from_yaw_pitch

__all__ = ["AimResult", "aim_light", "compute_target_distance", "direction_from_yaw_pitch"]
