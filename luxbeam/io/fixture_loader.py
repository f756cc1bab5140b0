"""
Fixture loading.

Turns an IES file into a light ready for the field models. This is the only
place outside the CLI that touches the filesystem; the parser and the models
work on text and values already in memory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from luxbeam.color.kelvin import kelvin_to_rgb
from luxbeam.config import LightDefaults
from luxbeam.core.vector import Vector3
from luxbeam.errors import FixtureLoadError
from luxbeam.models.light import LightPose
from luxbeam.models.photometry import Photometry
from luxbeam.parser.ies_parser import parse_ies_photometry
from luxbeam.photometry.profile import LightProfile, derive_light_profile


logger = logging.getLogger(__name__)


@dataclass
class LoadedFixture:
    light: LightPose
    photometry: Photometry
    profile: LightProfile
    color_temp_k: float
    source: Optional[str] = None


def build_light(
    text: str,
    position: Sequence[float] = (0.0, 3.0, 0.0),
    color_temp_k: float = 3500.0,
    intensity: float = 1500.0,
    defaults: LightDefaults = LightDefaults(),
    source: Optional[str] = None,
) -> LoadedFixture:
    photometry = parse_ies_photometry(text)
    profile = derive_light_profile(photometry, defaults)
    if photometry.is_empty:
        logger.info("No photometric data in %s; using default beam", source or "<text>")

    light = LightPose(
        position=Vector3.from_iterable(position),
        direction=Vector3.down(),
        cone_half_angle=profile.cone_half_angle,
        intensity=float(intensity),
        color=kelvin_to_rgb(color_temp_k),
    )
    return LoadedFixture(
        light=light,
        photometry=photometry,
        profile=profile,
        color_temp_k=float(color_temp_k),
        source=source,
    )


def load_fixture(
    ies_path: str | Path,
    position: Sequence[float] = (0.0, 3.0, 0.0),
    color_temp_k: float = 3500.0,
    intensity: float = 1500.0,
    defaults: LightDefaults = LightDefaults(),
) -> LoadedFixture:
    if not ies_path:
        raise FixtureLoadError("Missing IES path")
    p = Path(ies_path).expanduser().resolve()
    if not p.exists():
        raise FixtureLoadError("File not found", path=str(p))
    if not p.is_file():
        raise FixtureLoadError("Not a file", path=str(p))
    try:
        text = p.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FixtureLoadError(f"Failed to read IES file: {e}", path=str(p)) from e

    fixture = build_light(
        text,
        position=position,
        color_temp_k=color_temp_k,
        intensity=intensity,
        defaults=defaults,
        source=str(p),
    )
    logger.debug(
        "Loaded %s: beam %.1f deg, distance %.1f",
        p.name,
        fixture.profile.cone_half_angle_deg,
        fixture.profile.distance,
    )
    return fixture
