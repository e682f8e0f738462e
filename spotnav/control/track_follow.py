"""Track-follow estimator over a circular light spot.

API:
    track(samples, pose, light_radius) -> (segment_index, correction) | None
    track_local(samples_in_light_frame, light_radius) -> correction | None

The correction is the signed deviation of the track from straight-ahead in
[-pi/2, pi/2]; negative when the track bends to the robot's left, positive to
its right. Samples sparser than the spot diameter may step over the circle
entirely and never engage.
"""

from __future__ import annotations

import logging
from math import copysign, pi
from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from ..constants import TRACK_LOOKAHEAD
from ..geometry import Pose, angle_of, intersection

logger = logging.getLogger(__name__)


def engaged_segment(
    samples: Sequence[Pose], inside: Callable[[Pose], bool], lookahead: int = TRACK_LOOKAHEAD
) -> Optional[Tuple[int, int]]:
    """Return (begin, end) indices of the first run of samples inside the spot.

    The begin sample must be among the first ``lookahead`` samples; the run then
    extends for as long as consecutive samples stay inside.
    """
    assert lookahead > 0, "lookahead must be > 0"
    begin = None
    for i, p in enumerate(samples[:lookahead]):
        if inside(p):
            begin = i
            break
    if begin is None:
        return None
    end = begin
    for j in range(begin + 1, len(samples)):
        if not inside(samples[j]):
            break
        end = j
    return begin, end


def _correction(begin: Pose, end: Pose, r_squared: float) -> float:
    """Fold the entry/exit angular difference into a half-turn correction."""
    entry = intersection(begin, r_squared, -1.0)
    exit_ = intersection(end, r_squared, 1.0)
    diff = angle_of(exit_) - angle_of(entry)  # (-2pi, 2pi)
    return (copysign(1.0, diff) * pi - diff) / 2.0  # [-pi/2, pi/2]


def track(
    samples: Sequence[Pose],
    pose: Pose,
    light_radius: float,
    lookahead: int = TRACK_LOOKAHEAD,
) -> Optional[Tuple[int, float]]:
    """Estimate the steering correction from world-frame track samples.

    Returns the index of the first engaged sample and the correction angle,
    or None if no sample within the look-ahead window lies inside the spot.
    """
    assert light_radius > 0.0, "light_radius must be > 0"
    if len(samples) < 2:
        return None

    c = pose.transform_point((light_radius, 0.0))
    squared = light_radius * light_radius

    def inside(p: Pose) -> bool:
        d = c - p.translation
        return float(np.dot(d, d)) < squared

    seg = engaged_segment(samples, inside, lookahead)
    if seg is None:
        logger.debug("no track sample inside light spot within %d samples", lookahead)
        return None
    i, j = seg

    # Light-spot frame: circle centred at the origin
    local = (pose * Pose(light_radius, 0.0, 0.0)).inverse()
    correction = _correction(local * samples[i], local * samples[j], squared)
    logger.debug("track engaged samples %d..%d correction=%.4f", i, j, correction)
    return i, correction


def track_local(
    samples: Sequence[Pose], light_radius: float, lookahead: int = TRACK_LOOKAHEAD
) -> Optional[float]:
    """Same estimate for samples already expressed in the light-spot frame."""
    assert light_radius > 0.0, "light_radius must be > 0"
    if len(samples) < 2:
        return None
    squared = light_radius * light_radius

    seg = engaged_segment(samples, lambda p: p.x * p.x + p.y * p.y < squared, lookahead)
    if seg is None:
        logger.debug("no track sample inside light spot within %d samples", lookahead)
        return None
    i, j = seg
    return _correction(samples[i], samples[j], squared)
