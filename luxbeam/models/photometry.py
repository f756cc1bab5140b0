from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class Photometry:
    """
    Photometric record extracted from IES text.

    Candela values are stored scaled by the candela multiplier, as one flat
    sequence: H planes of V values each (vertical angles vary fastest).
    Every field is None on the empty record, which means the text carried
    no usable photometric data.
    """
    lamp_count: Optional[float] = None
    lumens_per_lamp: Optional[float] = None
    candela_multiplier: Optional[float] = None
    vertical_angles: Optional[Tuple[float, ...]] = None
    horizontal_angles: Optional[Tuple[float, ...]] = None
    candela: Optional[Tuple[float, ...]] = None
    peak_candela: Optional[float] = None
    beam_angle_rad: Optional[float] = None
    suggested_distance: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return self.candela is None

    @property
    def total_lumens(self) -> Optional[float]:
        if self.lamp_count is None or self.lumens_per_lamp is None:
            return None
        return self.lamp_count * self.lumens_per_lamp

    def candela_grid(self) -> np.ndarray:
        """Candela reshaped to [H][V]; short tables from truncated files are zero padded."""
        if self.is_empty:
            return np.zeros((0, 0), dtype=float)
        V = len(self.vertical_angles or ())
        H = len(self.horizontal_angles or ())
        flat = np.zeros(V * H, dtype=float)
        vals = np.asarray(self.candela, dtype=float)[: V * H]
        flat[: vals.size] = vals
        return flat.reshape(H, V)


EMPTY_PHOTOMETRY = Photometry()
