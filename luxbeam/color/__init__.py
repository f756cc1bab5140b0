from __future__ import annotations

from luxbeam.color.kelvin import KELVIN_MAX, KELVIN_MIN, kelvin_to_rgb

__all__ = ["KELVIN_MAX", "KELVIN_MIN", "kelvin_to_rgb"]
