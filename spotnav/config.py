from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from math import pi
from typing import Any, Dict

from .constants import (
    CLOSING_SCALE,
    DISTANCE_GAIN,
    HEADING_DEADBAND_RAD,
    LIGHT_RADIUS_M,
    MAX_SPEED,
    MAX_TURN_RATE,
    PIVOT_SPEED,
    REAR_ANGLE_RAD,
    REVERSE_REACH,
    SIDE_DEADBAND_RAD,
    TRACK_LOOKAHEAD,
)

logger = logging.getLogger(__name__)

DEADBAND_METHODS = ("heading", "side")
SPEED_LAWS = ("heading_blend", "distance")


@dataclass
class TrackConfig:
    lookahead: int = TRACK_LOOKAHEAD

    def __post_init__(self) -> None:
        assert self.lookahead > 0, "lookahead must be > 0"


@dataclass
class ApproachConfig:
    """Thresholds and limits for the point-approach controller.

    - closing_scale: close regime is |p| < closing_scale * light_radius
    - deadband: "heading" (|d| < heading_deadband) or "side" (sign-crossing
      test against side_deadband)
    - speed_law: "heading_blend" ((2 - |d|/pi) * sqrt(l)) or "distance"
      (distance_gain * sqrt(l))
    - reverse_reach: rear-approach only for targets with x > -reverse_reach * r
    """

    closing_scale: float = CLOSING_SCALE
    deadband: str = "heading"
    heading_deadband: float = HEADING_DEADBAND_RAD
    side_deadband: float = SIDE_DEADBAND_RAD
    speed_law: str = "heading_blend"
    distance_gain: float = DISTANCE_GAIN
    max_speed: float = MAX_SPEED
    max_turn_rate: float = MAX_TURN_RATE
    pivot_speed: float = PIVOT_SPEED
    allow_reverse: bool = True
    reverse_reach: float = REVERSE_REACH
    rear_angle: float = REAR_ANGLE_RAD
    damp_turn_by_distance: bool = True

    def __post_init__(self) -> None:
        assert 0.0 < self.closing_scale <= 1.0, "closing_scale in (0,1]"
        if self.deadband not in DEADBAND_METHODS:
            raise ValueError(f"Unknown deadband method '{self.deadband}', expected one of {DEADBAND_METHODS}")
        if self.speed_law not in SPEED_LAWS:
            raise ValueError(f"Unknown speed law '{self.speed_law}', expected one of {SPEED_LAWS}")
        assert self.heading_deadband > 0.0, "heading_deadband must be > 0"
        assert self.side_deadband > 0.0, "side_deadband must be > 0"
        assert self.distance_gain > 0.0, "distance_gain must be > 0"
        assert self.max_speed > 0.0, "max_speed must be > 0"
        assert self.max_turn_rate > 0.0, "max_turn_rate must be > 0"
        assert 0.0 <= self.pivot_speed <= self.max_speed, "pivot_speed in [0,max_speed]"
        assert self.reverse_reach >= 0.0, "reverse_reach must be >= 0"
        assert 0.0 < self.rear_angle < pi, "rear_angle in (0,pi)"

    @classmethod
    def variant(cls, name: str, **overrides: Any) -> "ApproachConfig":
        """Build one of the named controller variants, with optional overrides."""
        try:
            base = APPROACH_VARIANTS[name]
        except KeyError:
            raise ValueError(f"Unknown approach variant '{name}', expected one of {sorted(APPROACH_VARIANTS)}") from None
        return replace(base, **overrides)


APPROACH_VARIANTS: Dict[str, ApproachConfig] = {
    "default": ApproachConfig(),
    # Line-side docking: stop on the raw spot radius once the heading has
    # crossed toward the line.
    "line": ApproachConfig(
        closing_scale=1.0,
        deadband="side",
        speed_law="heading_blend",
        allow_reverse=True,
        reverse_reach=0.5,
        damp_turn_by_distance=True,
    ),
    # Point docking: shrunk radius for in-place turns, forward-only approach.
    "dock": ApproachConfig(
        closing_scale=0.95,
        deadband="heading",
        speed_law="distance",
        allow_reverse=False,
        damp_turn_by_distance=False,
    ),
}


def _warn_shadowed(variant: str, overrides: Dict[str, Any]) -> None:
    base = APPROACH_VARIANTS.get(variant)
    if base is None or variant == "default":
        return
    plain = ApproachConfig()
    for f in fields(ApproachConfig):
        own = getattr(base, f.name)
        if f.name in overrides and own != getattr(plain, f.name) and overrides[f.name] != own:
            logger.warning(
                "approach.%s=%r overrides variant '%s' value %r", f.name, overrides[f.name], variant, own
            )


@dataclass
class GuidanceConfig:
    light_radius: float = LIGHT_RADIUS_M
    track: TrackConfig = field(default_factory=TrackConfig)
    approach: ApproachConfig = field(default_factory=ApproachConfig)

    def __post_init__(self) -> None:
        assert self.light_radius > 0.0, "light_radius must be > 0"

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any] | None) -> "GuidanceConfig":
        d = cfg or {}
        # Allow nested sections or top-level overrides
        track = dict(d.get("track") or {})
        if "lookahead" in d:
            track["lookahead"] = d["lookahead"]
        approach_cfg = dict(d.get("approach") or {})
        variant = approach_cfg.pop("variant", d.get("variant", "default"))
        _warn_shadowed(variant, approach_cfg)
        approach = ApproachConfig.variant(variant, **approach_cfg)
        return cls(
            light_radius=float(d.get("light_radius", LIGHT_RADIUS_M)),
            track=TrackConfig(**track),
            approach=approach,
        )
