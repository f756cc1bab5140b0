from __future__ import annotations

from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from luxbeam.field.illuminance import HeatmapGrid  # noqa: E402
from luxbeam.viz.contours import compute_contour_levels  # noqa: E402


def _prepare(out_path: Path) -> Path:
    out_path = Path(out_path).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    return out_path


def _extent(grid: HeatmapGrid) -> list:
    return [float(grid.xs[0]), float(grid.xs[-1]), float(grid.zs[0]), float(grid.zs[-1])]


def render_heatmap_png(
    grid: HeatmapGrid,
    out_path: Path,
    title: str = "Photometric Heatmap",
    background: str = "#0f172a",
) -> Path:
    """Composite the heatmap RGBA over a dark floor, as the viewer shows it."""
    out_path = _prepare(out_path)
    rgba = np.clip(np.asarray(grid.rgba, dtype=float), 0.0, 1.0)

    fig, ax = plt.subplots(figsize=(6.0, 6.0))
    ax.set_facecolor(background)
    ax.imshow(rgba, origin="lower", extent=_extent(grid), interpolation="bilinear")
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("z")
    fig.text(0.01, 0.01, f"lit={grid.lit_fraction * 100.0:.1f}%", fontsize=8)
    fig.tight_layout()
    fig.savefig(out_path, dpi=160, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)
    return out_path


def render_lux_plane(
    grid: HeatmapGrid,
    out_path: Path,
    title: str = "Illuminance",
    with_contours: bool = True,
) -> Path:
    out_path = _prepare(out_path)
    lux = np.asarray(grid.lux, dtype=float)

    fig, ax = plt.subplots(figsize=(6.5, 5.0))
    im = ax.imshow(lux, cmap="inferno", origin="lower", extent=_extent(grid), aspect="auto")
    if with_contours:
        levels = compute_contour_levels(lux, n_levels=8, lit_only=True)
        if len(levels) >= 2:
            cs = ax.contour(grid.xs, grid.zs, lux, levels=levels, colors="white", linewidths=0.6, alpha=0.7)
            ax.clabel(cs, fmt="%.1f", fontsize=7)
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("z")
    cbar = fig.colorbar(im, ax=ax)
    cbar.set_label("lux")
    lit = lux[lux > 0.0]
    if lit.size:
        fig.text(0.01, 0.01, f"min={float(lit.min()):.2f}  avg={float(lit.mean()):.2f}  max={float(lit.max()):.2f}", fontsize=8)
    fig.tight_layout()
    fig.savefig(out_path, dpi=160, bbox_inches="tight")
    plt.close(fig)
    return out_path
