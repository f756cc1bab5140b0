from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RGB:
    # Linear channels, nominally in [0, 1]; volumetric colors may exceed 1.
    r: float
    g: float
    b: float

    def scale(self, factor: float) -> 'RGB':
        return RGB(self.r * factor, self.g * factor, self.b * factor)

    def lerp(self, other: 'RGB', t: float) -> 'RGB':
        return RGB(
            self.r + (other.r - self.r) * t,
            self.g + (other.g - self.g) * t,
            self.b + (other.b - self.b) * t,
        )

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)

    @staticmethod
    def white() -> 'RGB':
        return RGB(1.0, 1.0, 1.0)
