"""
Lenient IES photometry reader.

Only the part of LM-63 needed to drive a visual light is read: the photometric
header, the angle lists and the candela table. Anything that does not fit the
expected layout yields EMPTY_PHOTOMETRY instead of an exception, and callers
fall back to their default beam angle and throw distance.
"""

from __future__ import annotations

import logging
import math
import re
from typing import List, Sequence

from luxbeam.core.mathutils import clamp
from luxbeam.models.photometry import EMPTY_PHOTOMETRY, Photometry


logger = logging.getLogger(__name__)

_NUM_PREFIX_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")

HEADER_FIELD_COUNT = 10
# photometric type, units type, width, length, height
_SKIPPED_HEADER_FIELDS = 5

DEFAULT_BEAM_ANGLE_DEG = 40.0
MIN_BEAM_ANGLE_DEG = 5.0
MAX_BEAM_ANGLE_DEG = 120.0
HALF_POWER_RATIO = 0.5

MIN_SUGGESTED_DISTANCE = 10.0
FALLBACK_SUGGESTED_DISTANCE = 12.0
LUMENS_PER_DISTANCE_UNIT = 80.0


def _parse_float_prefix(tok: str) -> float:
    # Reads the leading number of a token ("12.5cd" -> 12.5); NaN when there is none.
    m = _NUM_PREFIX_RE.match(tok)
    if m is None:
        return math.nan
    return float(m.group(0))


def tokenise_numeric_stream(lines: Sequence[str]) -> List[float]:
    """Join `lines`, split on whitespace and keep every finite numeric token in order."""
    values: List[float] = []
    for tok in " ".join(lines).split():
        v = _parse_float_prefix(tok)
        if math.isfinite(v):
            values.append(v)
    return values


def _find_tilt_line(lines: Sequence[str]) -> int:
    for idx0, ln in enumerate(lines):
        if "TILT" in ln.strip().upper():
            return idx0
    return -1


def _half_power_beam_angle_deg(
    scaled_candela: Sequence[float],
    vertical_angles: Sequence[float],
    num_vertical: int,
    peak: float,
) -> float:
    """
    First vertical angle, in the first horizontal plane, whose candela drops
    below half of the peak. Other planes are not inspected.
    """
    threshold = peak * HALF_POWER_RATIO
    primary = scaled_candela[:num_vertical]
    for i, value in enumerate(primary):
        if value < threshold:
            return vertical_angles[i] if i < len(vertical_angles) else 0.0
    return DEFAULT_BEAM_ANGLE_DEG


def _suggested_distance(lumens_per_lamp: float, lamp_count: float) -> float:
    d = (lumens_per_lamp * lamp_count) / LUMENS_PER_DISTANCE_UNIT
    if not math.isfinite(d) or d == 0.0:
        d = FALLBACK_SUGGESTED_DISTANCE
    return max(MIN_SUGGESTED_DISTANCE, d)


def parse_ies_photometry(text: str) -> Photometry:
    """
    Parse IES text into a Photometry record.

    Never raises for any string input. Returns EMPTY_PHOTOMETRY when there is
    no TILT line, fewer than ten numbers after it, or no candela values.
    """
    lines = (text or "").splitlines()
    tilt_idx0 = _find_tilt_line(lines)
    if tilt_idx0 < 0:
        logger.debug("No TILT line found; no photometric data")
        return EMPTY_PHOTOMETRY

    tokens = tokenise_numeric_stream(lines[tilt_idx0 + 1 :])
    if len(tokens) < HEADER_FIELD_COUNT:
        logger.debug("Only %d numeric tokens after TILT line; header needs %d", len(tokens), HEADER_FIELD_COUNT)
        return EMPTY_PHOTOMETRY

    i = 0
    lamp_count = tokens[i]
    lumens_per_lamp = tokens[i + 1]
    candela_multiplier = tokens[i + 2]
    num_vertical = max(0, math.floor(tokens[i + 3]))
    num_horizontal = max(0, math.floor(tokens[i + 4]))
    i += 5 + _SKIPPED_HEADER_FIELDS

    vertical_angles = tokens[i : i + num_vertical]
    i += num_vertical
    horizontal_angles = tokens[i : i + num_horizontal]
    i += num_horizontal
    raw_candela = tokens[i : i + num_vertical * num_horizontal]

    if not raw_candela:
        logger.debug("Candela table is empty (V=%d, H=%d)", num_vertical, num_horizontal)
        return EMPTY_PHOTOMETRY

    m = candela_multiplier or 1.0
    scaled = [m * x for x in raw_candela]
    peak = max([0.0] + scaled)

    beam_deg = _half_power_beam_angle_deg(scaled, vertical_angles, num_vertical, peak)
    beam_deg = clamp(beam_deg or DEFAULT_BEAM_ANGLE_DEG, MIN_BEAM_ANGLE_DEG, MAX_BEAM_ANGLE_DEG)

    if len(scaled) < num_vertical * num_horizontal:
        logger.debug("Candela table truncated: %d of %d values", len(scaled), num_vertical * num_horizontal)

    return Photometry(
        lamp_count=lamp_count,
        lumens_per_lamp=lumens_per_lamp,
        candela_multiplier=candela_multiplier,
        vertical_angles=tuple(vertical_angles),
        horizontal_angles=tuple(horizontal_angles),
        candela=tuple(scaled),
        peak_candela=peak,
        beam_angle_rad=math.radians(beam_deg),
        suggested_distance=_suggested_distance(lumens_per_lamp, lamp_count),
    )
