import math

import numpy as np

from spotnav.geometry import Pose
from spotnav.sim.dynamics import UnicycleModel


def test_unicycle_straight_motion():
    model = UnicycleModel(v_max=1.5, w_max=2.0)
    model.reset()
    for _ in range(10):
        model.step((1.0, 0.0), 0.1)
    pose = model.as_pose()
    assert abs(pose.x - 1.0) < 1e-6
    assert abs(pose.y) < 1e-6
    assert abs(pose.theta) < 1e-12


def test_unicycle_turn_angle_wrap():
    model = UnicycleModel(v_max=1.5, w_max=2.0)
    # Start near +pi and turn slightly positive to test wrap
    model.reset(Pose(0.0, 0.0, 3.1))
    s = model.step((0.0, 2.0), 0.1)
    assert -math.pi <= s.theta <= math.pi
    assert s.theta < 0.0


def test_unicycle_clips_speed_and_turn_rate():
    model = UnicycleModel(v_max=1.5, w_max=2.0, v_min=-0.3)
    model.reset()
    s1 = model.step(action=(-1.0, 5.0), dt=0.1)
    assert np.isclose(s1.v, -0.3, atol=1e-6)
    assert np.isclose(s1.omega, 2.0)
    assert s1.x < 0.0


def test_apply_command_uses_clockwise_rate_and_scales_speed():
    model = UnicycleModel(v_max=0.5, w_max=2.0)
    model.reset(Pose(1.0, 2.0, 0.0))
    s = model.apply_command((1.0, -1.0), 0.1)
    # negative (clockwise-positive) rate turns counter-clockwise
    assert np.isclose(s.v, 0.5)
    assert np.isclose(s.omega, 1.0)
    assert s.theta > 0.0
    assert np.isclose(model.as_pose().x, 1.05)
    # reverse is allowed down to -v_max by default
    s = model.apply_command((-2.0, 0.0), 0.1)
    assert np.isclose(s.v, -0.5)
