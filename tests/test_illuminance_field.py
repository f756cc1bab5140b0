import math

import numpy as np
import pytest

from luxbeam.config import HeatmapSettings
from luxbeam.core.vector import Vector3
from luxbeam.field.illuminance import (
    GRADIENT_STOPS,
    HeatmapField,
    evaluate_illuminance,
    heatmap_gradient,
    illuminance_lux,
    sample_heatmap_grid,
)
from luxbeam.models.light import LightPose


def make_light(**kw):
    params = dict(
        position=Vector3(0.0, 3.0, 0.0),
        direction=Vector3(0.0, -1.0, 0.0),
        cone_half_angle=math.radians(38.0),
        intensity=1500.0,
    )
    params.update(kw)
    return LightPose(**params)


def test_point_below_light_inverse_square():
    light = make_light()
    assert illuminance_lux(Vector3(0.0, 0.0, 0.0), light) == pytest.approx(1500.0 / 9.0)


def test_saturated_point_is_white():
    s = evaluate_illuminance(Vector3(0.0, 0.0, 0.0), make_light(), reference_lux=150.0, max_distance=40.0)
    assert s is not None
    assert s.color.to_tuple() == pytest.approx((1.0, 1.0, 1.0))
    assert s.alpha == pytest.approx(0.85)


def test_mid_range_point_uses_compression_and_gradient():
    s = evaluate_illuminance(Vector3(0.0, 0.0, 0.0), make_light(), reference_lux=1000.0, max_distance=40.0)
    expected = (1500.0 / 9.0 / 1000.0) ** 0.42
    assert s is not None
    assert s.alpha == pytest.approx(expected * 0.85)
    assert s.color.to_tuple() == pytest.approx(heatmap_gradient(expected).to_tuple())
    assert 0.33 <= expected < 0.66


def test_beyond_max_distance_is_discarded():
    light = make_light(intensity=1e9)
    assert evaluate_illuminance(Vector3(0.0, 0.0, 0.0), light, reference_lux=1.0, max_distance=2.9) is None


def test_outside_cone_is_discarded():
    light = make_light()
    assert evaluate_illuminance(Vector3(10.0, 0.0, 0.0), light, 150.0, 40.0) is None
    assert evaluate_illuminance(Vector3(0.0, 5.0, 0.0), light, 150.0, 40.0) is None


def test_point_at_light_position_is_discarded():
    light = make_light()
    assert evaluate_illuminance(light.position, light, 150.0, 40.0) is None


def test_horizontal_aim_contributes_nothing_to_floor():
    light = make_light(direction=Vector3(1.0, 0.0, 0.0))
    assert evaluate_illuminance(Vector3(5.0, 3.0, 0.0), light, 150.0, 40.0) is None


def test_dim_light_is_discarded():
    light = make_light(intensity=1e-6)
    assert evaluate_illuminance(Vector3(0.0, 0.0, 0.0), light, 150.0, 40.0) is None


def test_gradient_hits_stops():
    for t, stop in zip((0.0, 0.33, 0.66, 1.0), GRADIENT_STOPS):
        assert heatmap_gradient(t).to_tuple() == pytest.approx(stop.color.to_tuple())


def test_soft_cone_edge_is_monotonic():
    light = make_light()
    lux = [illuminance_lux(Vector3(x, 0.0, 0.0), light) for x in np.linspace(1.8, 2.6, 9)]
    assert all(a >= b for a, b in zip(lux, lux[1:]))


def test_disabled_field_produces_nothing():
    light = make_light()
    off = HeatmapField(settings=HeatmapSettings(enabled=False), light=light)
    assert off.evaluate(Vector3(0.0, 0.0, 0.0)) is None
    assert off.sample_grid() is None
    no_light = HeatmapField(settings=HeatmapSettings(enabled=True), light=None)
    assert no_light.evaluate(Vector3(0.0, 0.0, 0.0)) is None
    on = HeatmapField(settings=HeatmapSettings(enabled=True), light=light)
    assert on.evaluate(Vector3(0.0, 0.0, 0.0)) is not None


def test_settings_track_light():
    light = make_light(intensity=3000.0)
    s = HeatmapSettings().for_light(light, light_distance=5.0)
    assert s.max_distance == 15.0
    assert s.reference_lux == 250.0
    s2 = HeatmapSettings().for_light(make_light(intensity=100.0), light_distance=30.0)
    assert s2.max_distance == 30.0
    assert s2.reference_lux == 60.0


def test_grid_matches_point_evaluation():
    light = make_light(direction=Vector3(0.3, -1.0, 0.1))
    settings = HeatmapSettings(enabled=True, reference_lux=150.0, max_distance=40.0, size=10.0, resolution=8)
    grid = sample_heatmap_grid(light, settings)
    assert grid.rgba.shape == (9, 9, 4)
    assert grid.lux.shape == (9, 9)
    for iz, z in enumerate(grid.zs):
        for ix, x in enumerate(grid.xs):
            s = evaluate_illuminance(Vector3(float(x), grid.height, float(z)), light, 150.0, 40.0)
            if s is None:
                assert grid.rgba[iz, ix, 3] == 0.0
            else:
                assert grid.rgba[iz, ix, 3] == pytest.approx(s.alpha, rel=1e-9, abs=1e-12)
                assert tuple(grid.rgba[iz, ix, :3]) == pytest.approx(s.color.to_tuple(), abs=1e-9)
    assert 0.0 < grid.lit_fraction < 1.0


def test_grid_respects_max_distance():
    light = make_light()
    settings = HeatmapSettings(enabled=True, max_distance=1.0, size=4.0, resolution=4)
    grid = sample_heatmap_grid(light, settings)
    assert float(grid.rgba[..., 3].max()) == 0.0
    assert float(grid.lux.max()) == 0.0


def test_field_follows_light_reassignment():
    field = HeatmapField(settings=HeatmapSettings(enabled=True), light=make_light())
    assert field.sample_grid() is not None
    field.light = None
    assert field.evaluate(Vector3(0.0, 0.0, 0.0)) is None
    assert field.sample_grid() is None
