from __future__ import annotations

from luxbeam.core.vector import Vector3
from luxbeam.core.mathutils import clamp, mix, smoothstep

__all__ = ["Vector3", "clamp", "mix", "smoothstep"]
