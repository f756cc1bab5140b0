from __future__ import annotations

import numpy as np


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    # Hermite step, same definition as the GLSL builtin.
    if edge1 == edge0:
        return 0.0 if x < edge0 else 1.0
    t = clamp((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)


def mix(a: float, b: float, t: float) -> float:
    return a * (1.0 - t) + b * t


def smoothstep_array(edge0: float, edge1: float, x: np.ndarray) -> np.ndarray:
    t = np.clip((np.asarray(x, dtype=float) - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)
