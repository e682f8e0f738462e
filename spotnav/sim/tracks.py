"""Synthetic track-sample sequences: poses along a path with tangent headings."""

from __future__ import annotations

from math import atan2, cos, sin
from typing import List, Tuple

import numpy as np

from ..geometry import Pose


def _polyline_arclength(pts: np.ndarray) -> np.ndarray:
    segs = np.linalg.norm(pts[1:] - pts[:-1], axis=1)
    return np.concatenate([[0.0], np.cumsum(segs)])


def _point_at_arclength(pts: np.ndarray, s: np.ndarray, s_target: float) -> Tuple[np.ndarray, int]:
    if s_target <= s[0]:
        return pts[0], 0
    if s_target >= s[-1]:
        return pts[-1], len(pts) - 2
    i = int(np.searchsorted(s, s_target) - 1)
    seg_len = s[i + 1] - s[i]
    if seg_len <= 0.0:
        return pts[i], i
    alpha = (s_target - s[i]) / seg_len
    return pts[i] + alpha * (pts[i + 1] - pts[i]), i


def straight_track(start: Tuple[float, float], heading: float, length: float, spacing: float) -> List[Pose]:
    """Samples every ``spacing`` meters along a straight line."""
    assert length > 0.0 and spacing > 0.0, "length and spacing must be > 0"
    n = int(np.floor(length / spacing)) + 1
    c, s = cos(heading), sin(heading)
    return [Pose(start[0] + k * spacing * c, start[1] + k * spacing * s, heading) for k in range(n)]


def arc_track(
    start: Tuple[float, float],
    heading: float,
    radius: float,
    sweep: float,
    spacing: float,
) -> List[Pose]:
    """Samples along a circular arc starting at ``start`` tangent to ``heading``.

    Positive ``sweep`` curves to the left (counter-clockwise), negative to the
    right.
    """
    assert radius > 0.0 and spacing > 0.0, "radius and spacing must be > 0"
    turn = 1.0 if sweep >= 0.0 else -1.0
    # centre sits on the side the arc bends toward
    cx = start[0] - turn * radius * sin(heading)
    cy = start[1] + turn * radius * cos(heading)
    n = int(np.floor(abs(sweep) * radius / spacing)) + 1
    out = []
    for k in range(n):
        phi = turn * k * spacing / radius
        th = heading + phi
        out.append(Pose(cx + turn * radius * sin(th), cy - turn * radius * cos(th), th))
    return out


def polyline_track(waypoints, spacing: float) -> List[Pose]:
    """Resample a (N, 2) polyline at fixed arc-length spacing."""
    pts = np.asarray(waypoints, dtype=float)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError("waypoints must be (N,2)")
    if pts.shape[0] < 2:
        raise ValueError("need at least 2 waypoints")
    assert spacing > 0.0, "spacing must be > 0"
    s = _polyline_arclength(pts)
    out = []
    for s_k in np.arange(0.0, float(s[-1]) + 1e-9, spacing):
        q, i = _point_at_arclength(pts, s, float(s_k))
        d = pts[i + 1] - pts[i]
        out.append(Pose.from_xy_angle(q, atan2(d[1], d[0])))
    return out
