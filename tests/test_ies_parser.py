import logging
import math

import pytest

from luxbeam.models.photometry import EMPTY_PHOTOMETRY
from luxbeam.parser.ies_parser import parse_ies_photometry, tokenise_numeric_stream


def _ies(header: str, body: str) -> str:
    return f"IESNA:LM-63-2002\n[MANUFAC] Acme\n[LUMCAT] XZ-400\nTILT=NONE\n{header}\n{body}\n"


def test_empty_text_returns_empty_record():
    ph = parse_ies_photometry("")
    assert ph == EMPTY_PHOTOMETRY
    assert ph.is_empty
    assert ph.beam_angle_rad is None
    assert ph.suggested_distance is None


def test_missing_tilt_returns_empty_record():
    text = "IESNA:LM-63-2002\n1 3000 1 2 1 1 2 0 0 0\n0 90\n0\n1000 400\n"
    assert parse_ies_photometry(text).is_empty


def test_too_few_header_tokens_returns_empty_record():
    text = "IESNA:LM-63-2002\nTILT=NONE\n1 3000 1 2 1 1 2 0 0\n"
    assert parse_ies_photometry(text).is_empty


def test_empty_candela_table_returns_empty_record():
    assert parse_ies_photometry(_ies("1 3000 1 0 0 1 2 0 0 0", "")).is_empty


def test_two_angle_beam_selects_first_value_below_half_power():
    ph = parse_ies_photometry(_ies("1 3000 1 2 1 1 2 0 0 0", "0 90\n0\n1000 400"))
    assert not ph.is_empty
    assert ph.lamp_count == 1
    assert ph.lumens_per_lamp == 3000
    assert ph.vertical_angles == (0.0, 90.0)
    assert ph.horizontal_angles == (0.0,)
    assert ph.candela == (1000.0, 400.0)
    assert ph.peak_candela == 1000.0
    assert ph.beam_angle_rad == pytest.approx(1.5708, abs=1e-4)
    assert ph.suggested_distance == pytest.approx(37.5)


def test_candela_scaled_by_multiplier():
    ph = parse_ies_photometry(_ies("1 16000 2 3 2 1 2 0.45 0.45 0.10", "0 45 90\n0 180\n0 1 2\n3 4 5"))
    assert ph.candela == (0.0, 2.0, 4.0, 6.0, 8.0, 10.0)
    assert ph.peak_candela == 10.0
    grid = ph.candela_grid()
    assert grid.shape == (2, 3)
    assert grid[1].tolist() == [6.0, 8.0, 10.0]
    assert len(ph.candela) == len(ph.vertical_angles) * len(ph.horizontal_angles)


def test_zero_multiplier_treated_as_one():
    ph = parse_ies_photometry(_ies("1 3000 0 2 1 1 2 0 0 0", "0 30\n0\n800 100"))
    assert ph.candela == (800.0, 100.0)
    assert ph.candela_multiplier == 0.0


def test_no_half_power_drop_defaults_to_40_degrees():
    ph = parse_ies_photometry(_ies("1 3000 1 3 1 1 2 0 0 0", "0 10 20\n0\n1000 900 800"))
    assert ph.beam_angle_rad == pytest.approx(math.radians(40.0))


def test_beam_angle_clamped_to_minimum():
    ph = parse_ies_photometry(_ies("1 3000 1 2 1 1 2 0 0 0", "0 2\n0\n1000 10"))
    assert ph.beam_angle_rad == pytest.approx(math.radians(5.0))


def test_beam_angle_clamped_to_maximum():
    ph = parse_ies_photometry(_ies("1 3000 1 3 1 1 2 0 0 0", "0 90 180\n0\n1000 900 10"))
    assert ph.beam_angle_rad == pytest.approx(math.radians(120.0))


def test_zero_beam_angle_reads_as_default():
    ph = parse_ies_photometry(_ies("1 3000 1 2 1 1 2 0 0 0", "0 90\n0\n0 100"))
    assert ph.peak_candela == 100.0
    assert ph.beam_angle_rad == pytest.approx(math.radians(40.0))


def test_only_first_horizontal_plane_is_scanned():
    # Second plane drops at 30 degrees, first plane never drops.
    ph = parse_ies_photometry(_ies("1 3000 1 3 2 1 2 0 0 0", "0 30 60\n0 90\n1000 900 800\n1000 100 50"))
    assert ph.beam_angle_rad == pytest.approx(math.radians(40.0))


def test_suggested_distance_floor_and_fallback():
    low = parse_ies_photometry(_ies("1 400 1 2 1 1 2 0 0 0", "0 90\n0\n1000 400"))
    assert low.suggested_distance == 10.0
    dark = parse_ies_photometry(_ies("1 0 1 2 1 1 2 0 0 0", "0 90\n0\n1000 400"))
    assert dark.suggested_distance == 12.0
    multi = parse_ies_photometry(_ies("4 2000 1 2 1 1 2 0 0 0", "0 90\n0\n1000 400"))
    assert multi.suggested_distance == pytest.approx(100.0)


def test_truncated_candela_table_keeps_available_values():
    ph = parse_ies_photometry(_ies("1 3000 1 3 2 1 2 0 0 0", "0 45 90\n0 180\n10 8 2 7"))
    assert ph.candela == (10.0, 8.0, 2.0, 7.0)
    grid = ph.candela_grid()
    assert grid.shape == (2, 3)
    assert grid[1].tolist() == [7.0, 0.0, 0.0]


def test_angle_counts_are_floored():
    ph = parse_ies_photometry(_ies("1 3000 1 2.7 1.2 1 2 0 0 0", "0 90\n0\n1000 400"))
    assert ph.vertical_angles == (0.0, 90.0)
    assert ph.horizontal_angles == (0.0,)


def test_lowercase_tilt_and_junk_tokens():
    text = "header\ntilt=none\n1 3000 1 abc 2 1 nan 1 2 0 0 0\n0 90\n0\n1000cd 400\n"
    ph = parse_ies_photometry(text)
    assert ph.candela == (1000.0, 400.0)


def test_garbage_never_raises():
    for text in ["TILT", "TILT\n\x00 \x01", "TILT=NONE\n" + "inf " * 20, "no marker at all", "TILT\n1e999 " * 12]:
        assert parse_ies_photometry(text).is_empty


def test_tokenise_numeric_stream_keeps_prefixes():
    assert tokenise_numeric_stream(["1 -2.5 .5", "3e2 7x abc +4"]) == [1.0, -2.5, 0.5, 300.0, 7.0, 4.0]


def test_empty_result_reason_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="luxbeam.parser.ies_parser")
    parse_ies_photometry("IESNA:LM-63-2002\n")
    assert "No TILT line" in caplog.text
