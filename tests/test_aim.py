import pytest

from luxbeam.core.vector import Vector3
from luxbeam.models.light import LightPose
from luxbeam.scene.aim import aim_light, compute_target_distance, direction_from_yaw_pitch


def test_straight_down():
    d = direction_from_yaw_pitch(0.0, -90.0)
    assert d.to_tuple() == pytest.approx((0.0, -1.0, 0.0), abs=1e-12)


def test_yaw_turns_about_vertical():
    d = direction_from_yaw_pitch(90.0, 0.0)
    assert d.to_tuple() == pytest.approx((1.0, 0.0, 0.0), abs=1e-12)


def test_target_distance_hits_floor():
    assert compute_target_distance(Vector3(0.0, 3.25, 0.0), Vector3(0.0, -1.0, 0.0)) == pytest.approx(3.25)
    d = direction_from_yaw_pitch(0.0, -30.0)
    assert compute_target_distance(Vector3(0.0, 3.0, 0.0), d) == pytest.approx(6.0)


def test_target_distance_fixed_throws():
    origin = Vector3(0.0, 3.0, 0.0)
    assert compute_target_distance(origin, Vector3(1.0, 0.0, 0.0)) == 10.0
    assert compute_target_distance(origin, Vector3(0.0, 1.0, 0.0)) == 3.0
    assert compute_target_distance(Vector3(0.0, 0.1, 0.0), Vector3(0.0, -1.0, 0.0)) == 0.5


def test_aim_light_updates_direction():
    light = LightPose(position=Vector3(0.0, 3.0, 0.0), direction=Vector3(1.0, 0.0, 0.0))
    res = aim_light(light, yaw_deg=0.0, pitch_deg=-90.0)
    assert light.direction.to_tuple() == pytest.approx((0.0, -1.0, 0.0), abs=1e-12)
    assert res.distance == pytest.approx(3.0)
    assert res.target.to_tuple() == pytest.approx((0.0, 0.0, 0.0), abs=1e-12)
    assert res.light_distance == 5.0
