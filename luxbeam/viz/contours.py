from __future__ import annotations

from typing import List

import numpy as np


def compute_contour_levels(values: np.ndarray, n_levels: int = 8, lit_only: bool = False) -> List[float]:
    """
    Evenly spaced contour levels between the min and max of `values`.

    With lit_only, cells at or below zero (outside the beam) do not pull the
    lowest level down to zero.
    """
    arr = np.asarray(values, dtype=float).reshape(-1)
    arr = arr[np.isfinite(arr)]
    if lit_only:
        arr = arr[arr > 0.0]
    if arr.size == 0:
        return [0.0]
    vmin = float(np.min(arr))
    vmax = float(np.max(arr))
    if vmax <= vmin + 1e-12:
        return [vmin]
    n = max(2, int(n_levels))
    return [float(x) for x in np.linspace(vmin, vmax, n)]
