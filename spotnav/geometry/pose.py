"""Immutable 2D rigid transform used for robot, target and track-sample poses."""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, sin
from typing import Tuple

import numpy as np


def normalize_angle(theta: float) -> float:
    """Wrap an angle to [-pi, pi] via atan2."""
    return atan2(sin(theta), cos(theta))


@dataclass(frozen=True)
class Pose:
    """Planar pose: translation (x, y) followed by rotation theta.

    Composition follows the usual transform convention: ``a * b`` expresses
    ``b`` (given in ``a``'s frame) in the frame ``a`` lives in.
    """

    x: float
    y: float
    theta: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "theta", normalize_angle(float(self.theta)))

    @classmethod
    def identity(cls) -> "Pose":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_xy_angle(cls, xy, angle: float) -> "Pose":
        """Pose at point ``xy`` (any 2-sequence or array) with heading ``angle``."""
        return cls(float(xy[0]), float(xy[1]), angle)

    @property
    def translation(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    @property
    def rotation(self) -> float:
        return self.theta

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.theta)

    def transform_point(self, pt) -> np.ndarray:
        """Map a point from this pose's frame into the parent frame."""
        px, py = float(pt[0]), float(pt[1])
        c, s = cos(self.theta), sin(self.theta)
        return np.array([self.x + c * px - s * py, self.y + s * px + c * py], dtype=float)

    def inverse(self) -> "Pose":
        c, s = cos(self.theta), sin(self.theta)
        # -R^T t
        return Pose(-(c * self.x + s * self.y), s * self.x - c * self.y, -self.theta)

    def __mul__(self, other: "Pose") -> "Pose":
        if not isinstance(other, Pose):
            return NotImplemented
        x, y = self.transform_point((other.x, other.y))
        return Pose(x, y, self.theta + other.theta)
