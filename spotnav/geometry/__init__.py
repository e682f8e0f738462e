"""Planar geometry primitives."""

from .pose import Pose, normalize_angle
from .circle import angle_of, dir_vector, intersection

__all__ = [
    "Pose",
    "normalize_angle",
    "angle_of",
    "dir_vector",
    "intersection",
]
