from __future__ import annotations

import argparse
import logging
import math
from dataclasses import replace
from pathlib import Path

from luxbeam.config import ViewerConfig, load_config
from luxbeam.database.catalog import FixtureCatalog
from luxbeam.errors import LuxbeamError
from luxbeam.field.illuminance import sample_heatmap_grid
from luxbeam.field.volumetric import compute_beam_geometry, is_beam_visible, volumetric_strength
from luxbeam.io.fixture_loader import load_fixture
from luxbeam.scene.aim import aim_light


logger = logging.getLogger(__name__)


_DEMO_IES_TEXT = """IESNA:LM-63-2002
[MANUFAC] Luxbeam Demo
[LUMCAT] SPOT-24
[LAMP] LED 3000K
TILT=NONE
1 3000 1 7 1 1 2 0.10 0.10 0.05
0 5 10 15 20 25 30
0
4200 4050 3600 2900 1900 900 300
"""


def _load_viewer_config(args: argparse.Namespace) -> ViewerConfig:
    if getattr(args, "config", None):
        return load_config(args.config)
    return ViewerConfig()


def _cmd_demo(args: argparse.Namespace) -> int:
    outpath = Path(args.out).expanduser().resolve()
    outpath.parent.mkdir(parents=True, exist_ok=True)
    outpath.write_text(_DEMO_IES_TEXT, encoding="utf-8")
    print(f"Saved demo IES to: {outpath}")
    return 0


def _cmd_inspect(args: argparse.Namespace) -> int:
    cfg = _load_viewer_config(args)
    fixture = load_fixture(
        args.file,
        position=(0.0, cfg.ceiling_height, 0.0),
        color_temp_k=args.cct if args.cct is not None else cfg.default_cct,
        intensity=args.intensity if args.intensity is not None else cfg.default_intensity,
        defaults=cfg.light_defaults,
    )
    ph = fixture.photometry
    print("Luxbeam Inspect")
    print(f"  File: {fixture.source}")
    if ph.is_empty:
        print("[ERROR] No photometric data found; defaults would apply.")
        return 3

    print(f"  Lamps: {ph.lamp_count:g} x {ph.lumens_per_lamp:g} lm")
    print(f"  Angles: {len(ph.vertical_angles or ())} vertical, {len(ph.horizontal_angles or ())} horizontal")
    print(f"  Peak candela: {ph.peak_candela:g}")
    print(f"  Beam half-angle: {math.degrees(ph.beam_angle_rad or 0.0):.1f} deg")
    print(f"  Suggested distance: {ph.suggested_distance:g}")
    c = fixture.light.color
    print(f"  Color ({fixture.color_temp_k:g} K): r={c.r:.3f} g={c.g:.3f} b={c.b:.3f}")
    print(f"  Volumetric strength: {volumetric_strength(fixture.light):.3f}")
    return 0


def _cmd_heatmap(args: argparse.Namespace) -> int:
    # Import here so the other commands work without matplotlib installed
    from luxbeam.viz.falsecolor import render_heatmap_png, render_lux_plane

    cfg = _load_viewer_config(args)
    fixture = load_fixture(
        args.file,
        position=(0.0, args.height if args.height is not None else cfg.ceiling_height, 0.0),
        color_temp_k=args.cct if args.cct is not None else cfg.default_cct,
        intensity=args.intensity if args.intensity is not None else cfg.default_intensity,
        defaults=cfg.light_defaults,
    )
    light = fixture.light
    aim = aim_light(light, args.yaw, args.pitch)
    settings = replace(cfg.heatmap.for_light(light, aim.light_distance), enabled=True)
    if args.resolution is not None:
        settings = replace(settings, resolution=int(args.resolution))
    grid = sample_heatmap_grid(light, settings)

    outdir = Path(args.out).expanduser().resolve()
    heat_png = render_heatmap_png(grid, outdir / f"{args.stem}_heatmap.png")
    lux_png = render_lux_plane(grid, outdir / f"{args.stem}_lux.png")

    beam = compute_beam_geometry(light, aim.target)
    print("Luxbeam Heatmap")
    print(f"  File: {fixture.source}")
    print(f"  Saved: {heat_png}")
    print(f"  Saved: {lux_png}")
    print(f"  Peak lux: {float(grid.lux.max()):.2f}  lit: {grid.lit_fraction * 100.0:.1f}%")
    print(f"  Beam: radius={beam.radius:.2f} length={beam.length:.2f} visible={is_beam_visible(light)}")
    return 0


def _cmd_fixtures(args: argparse.Namespace) -> int:
    catalog = FixtureCatalog.load(args.catalog)
    matches = catalog.filter(args.query or "")
    if not matches:
        print("No fixtures found. Try a different search.")
        return 0
    for f in matches:
        watt = f" {f.wattage:g}W" if f.wattage is not None else ""
        print(f"{f.display_name}  [Mode: {f.display_mode}]{watt}  {f.ies_path or '-'}")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="luxbeam")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    demo = sub.add_parser("demo", help="Write a small demo .ies file to disk.")
    demo.add_argument("--out", default="data/ies_samples/demo.ies", help="Output .ies path")
    demo.set_defaults(func=_cmd_demo)

    ins = sub.add_parser("inspect", help="Parse an IES file and print its photometry and derived beam.")
    ins.add_argument("file", help="Path to .ies file")
    ins.add_argument("--config", default=None, help="Viewer config JSON")
    ins.add_argument("--intensity", type=float, default=None, help="Light intensity (cd)")
    ins.add_argument("--cct", type=float, default=None, help="Color temperature (K)")
    ins.set_defaults(func=_cmd_inspect)

    hm = sub.add_parser("heatmap", help="Sample the ground-plane heatmap and save PNGs.")
    hm.add_argument("file", help="Path to .ies file")
    hm.add_argument("--out", default="out", help="Output directory (default: out)")
    hm.add_argument("--stem", default="luxbeam", help="Filename stem for outputs")
    hm.add_argument("--config", default=None, help="Viewer config JSON")
    hm.add_argument("--intensity", type=float, default=None, help="Light intensity (cd)")
    hm.add_argument("--cct", type=float, default=None, help="Color temperature (K)")
    hm.add_argument("--yaw", type=float, default=0.0, help="Yaw in degrees")
    hm.add_argument("--pitch", type=float, default=-90.0, help="Pitch in degrees (-90 = straight down)")
    hm.add_argument("--height", type=float, default=None, help="Mounting height")
    hm.add_argument("--resolution", type=int, default=None, help="Grid cells per side")
    hm.set_defaults(func=_cmd_heatmap)

    fx = sub.add_parser("fixtures", help="List fixtures from a fixtures.json catalog.")
    fx.add_argument("catalog", help="Path to fixtures.json")
    fx.add_argument("--query", default="", help="Filter by name or mode")
    fx.set_defaults(func=_cmd_fixtures)

    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return int(args.func(args))
    except LuxbeamError as e:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        print(f"[ERROR] {e}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
