"""Unicycle kinematics for closed-loop runs of the guidance core.

``step`` takes physical (v, omega) with omega counter-clockwise. Guidance
commands are a normalized speed and a clockwise rate; ``apply_command``
converts them.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, sin

from ..geometry import Pose


@dataclass
class UnicycleState:
    """Pose after a step plus the (clipped) velocities that produced it."""

    x: float
    y: float
    theta: float
    v: float
    omega: float


class UnicycleModel:
    def __init__(self, v_max: float, w_max: float, v_min: float | None = None) -> None:
        self.v_max = float(v_max)
        self.w_max = float(w_max)
        # reverse allowed by default: the approach controller backs up
        self.v_min = float(-v_max if v_min is None else v_min)
        self._pose = Pose.identity()

    def reset(self, pose: Pose | None = None) -> Pose:
        self._pose = pose or Pose.identity()
        return self._pose

    def step(self, action: tuple[float, float], dt: float) -> UnicycleState:
        """Apply clipped (v, omega) for duration dt using Euler integration."""
        v = min(max(float(action[0]), self.v_min), self.v_max)
        w = min(max(float(action[1]), -self.w_max), self.w_max)
        p = self._pose
        self._pose = Pose(p.x + v * cos(p.theta) * dt, p.y + v * sin(p.theta) * dt, p.theta + w * dt)
        return UnicycleState(self._pose.x, self._pose.y, self._pose.theta, v, w)

    def apply_command(self, cmd: tuple[float, float], dt: float) -> UnicycleState:
        """Execute a guidance (speed, clockwise rate) command; speed is a fraction of v_max."""
        speed, rate = cmd
        return self.step((speed * self.v_max, -rate), dt)

    def as_pose(self) -> Pose:
        return self._pose
