"""Ray/circle geometry shared by the track estimator and approach controller.

All functions work in a frame whose origin is the light-spot centre, so the
sensing circle is always ``|v|^2 = r^2``.
"""

from __future__ import annotations

from math import atan2, cos, sin, sqrt

import numpy as np

from ..constants import DISCRIMINANT_TOL
from .pose import Pose


def dir_vector(p: Pose) -> np.ndarray:
    """Unit heading vector of a pose."""
    return np.array([cos(p.theta), sin(p.theta)], dtype=float)


def angle_of(v) -> float:
    """Signed planar angle of a 2D vector in (-pi, pi]."""
    return float(atan2(v[1], v[0]))


def intersection(p: Pose, r_squared: float, sign: float) -> np.ndarray:
    """Point where the line through ``p`` along its heading meets the circle.

    Solves ``|vp + k*vd|^2 = r^2`` for ``k``. ``sign=-1`` picks the near root
    (entry, behind ``p`` when it lies inside), ``sign=+1`` the far root (exit).

    The caller guarantees ``p`` lies inside or on the circle. Slightly
    negative discriminants from round-off are clamped to zero.
    """
    assert sign in (-1.0, 1.0), "sign must be -1 or +1"
    vp = p.translation
    vd = dir_vector(p)

    # a = 1 since vd is a unit vector
    b = 2.0 * float(np.dot(vp, vd))
    c = float(np.dot(vp, vp)) - r_squared

    disc = b * b - 4.0 * c
    assert disc >= -DISCRIMINANT_TOL * max(1.0, r_squared), (
        f"ray does not meet circle (discriminant={disc:.3e}); pose must lie inside"
    )
    disc = max(disc, 0.0)
    k = (-b + sign * sqrt(disc)) / 2.0
    return vp + k * vd
