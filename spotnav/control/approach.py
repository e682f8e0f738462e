"""Point-approach controller: drive the light-spot centre onto a target pose.

API: goto(target, light_radius, cfg) -> (speed, angular_rate) | None
The target is given in the robot frame. The angular rate is clockwise
positive (a target on the robot's left yields a negative rate). None means the
goal is reached and no further motion should be commanded.
"""

from __future__ import annotations

import logging
from enum import Enum
from math import atan2, copysign, pi, sqrt
from typing import Optional, Tuple

from ..config import ApproachConfig
from ..geometry import Pose

logger = logging.getLogger(__name__)


class ApproachRegime(Enum):
    DONE = "done"
    PIVOT = "pivot"
    APPROACH = "approach"
    REVERSE = "reverse"


def _sign(x: float) -> float:
    return copysign(1.0, x)


def _docking_offset(target: Pose, light_radius: float) -> Pose:
    # Where the robot origin must be for the spot centre to sit on the target
    return target * Pose(-light_radius, 0.0, 0.0)


def _aligned(p_y: float, d: float, cfg: ApproachConfig) -> bool:
    if cfg.deadband == "heading":
        return abs(d) < cfg.heading_deadband
    # "side": heading has just crossed toward the side the target lies on
    return (_sign(p_y) > 0.0 and _sign(d) < 0.0 and -cfg.side_deadband < d) or (
        _sign(p_y) < 0.0 and _sign(d) > 0.0 and d < cfg.side_deadband
    )


def _is_rear(p_x: float, direction: float, light_radius: float, cfg: ApproachConfig) -> bool:
    return cfg.allow_reverse and p_x > -cfg.reverse_reach * light_radius and abs(direction) > cfg.rear_angle


def classify(target: Pose, light_radius: float, cfg: ApproachConfig | None = None) -> ApproachRegime:
    """Which regime goto() will use for this target."""
    cfg = cfg or ApproachConfig()
    t = _docking_offset(target, light_radius)
    l = t.x * t.x + t.y * t.y
    if l < (cfg.closing_scale * light_radius) ** 2:
        return ApproachRegime.DONE if _aligned(t.y, t.theta, cfg) else ApproachRegime.PIVOT
    if _is_rear(t.x, -atan2(t.y, t.x), light_radius, cfg):
        return ApproachRegime.REVERSE
    return ApproachRegime.APPROACH


def goto(
    target: Pose, light_radius: float, cfg: ApproachConfig | None = None
) -> Optional[Tuple[float, float]]:
    """Compute a (speed, angular_rate) command toward ``target``."""
    assert light_radius > 0.0, "light_radius must be > 0"
    cfg = cfg or ApproachConfig()
    t = _docking_offset(target, light_radius)
    px, py = t.x, t.y
    d = t.rotation
    l = px * px + py * py

    closing = cfg.closing_scale * light_radius
    if l < closing * closing:
        if _aligned(py, d, cfg):
            logger.debug("goal reached: offset=%.4f heading=%.4f", sqrt(l), d)
            return None
        # Rotate in place toward the target heading
        return cfg.pivot_speed, _sign(d) * -cfg.max_turn_rate

    if cfg.speed_law == "heading_blend":
        speed = min(cfg.max_speed, (2.0 - abs(d) / pi) * sqrt(l))
    else:
        speed = min(cfg.max_speed, cfg.distance_gain * sqrt(l))
    direction = -atan2(py, px)

    # Target close behind: back up onto it instead of turning around
    if _is_rear(px, direction, light_radius, cfg):
        speed *= _sign(px)
        direction = _sign(direction) * pi - direction
        logger.debug("rear approach: speed=%.3f dir=%.4f", speed, direction)

    direction = min(max(direction, -cfg.max_turn_rate), cfg.max_turn_rate)
    if cfg.damp_turn_by_distance:
        direction /= max(1.0, px)
    return speed, direction
