"""
Color temperature to RGB.

Tanner Helland's curve fit of the blackbody locus, good to a few percent
between 1000 K and 40000 K. Channels come back in [0, 1].
"""

from __future__ import annotations

import math

from luxbeam.core.mathutils import clamp
from luxbeam.models.color import RGB


KELVIN_MIN = 1000.0
KELVIN_MAX = 40000.0


def kelvin_to_rgb(kelvin: float) -> RGB:
    k = float(kelvin)
    if math.isnan(k):
        k = KELVIN_MIN
    t = clamp(k, KELVIN_MIN, KELVIN_MAX) / 100.0

    if t <= 66.0:
        r = 255.0
        g = 99.4708025861 * math.log(t) - 161.1195681661
        b = 0.0 if t <= 19.0 else 138.5177312231 * math.log(t - 10.0) - 305.0447927307
    else:
        r = 329.698727446 * math.pow(t - 60.0, -0.1332047592)
        g = 288.1221695283 * math.pow(t - 60.0, -0.0755148492)
        b = 255.0

    return RGB(
        r=clamp(r / 255.0, 0.0, 1.0),
        g=clamp(g / 255.0, 0.0, 1.0),
        b=clamp(b / 255.0, 0.0, 1.0),
    )
