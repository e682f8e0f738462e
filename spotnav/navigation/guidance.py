from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence, Tuple

from ..config import GuidanceConfig
from ..control.approach import ApproachRegime, classify, goto
from ..control.track_follow import track
from ..geometry import Pose

logger = logging.getLogger(__name__)


class GuidanceMode(Enum):
    IDLE = 0
    TRACK_FOLLOW = 1
    GOTO = 2


class TrackProgress:
    """Monotonic pointer into the current track-sample sequence.

    The estimator reports the index of the first engaged sample; samples before
    it have been passed and are skipped on the next cycle.
    """

    def __init__(self) -> None:
        self.index = 0

    def reset(self) -> None:
        self.index = 0

    def window(self, samples: Sequence[Pose]) -> Sequence[Pose]:
        return samples[self.index:]

    def advance(self, engaged: int) -> int:
        """Advance by an index relative to the current window; returns the new pointer."""
        assert engaged >= 0, "engaged index must be >= 0"
        self.index += engaged
        return self.index


class Guidance:
    """Dispatches between track following and point approach.

    The estimator and controller are pure; this wrapper only carries the mode
    and the track progress pointer from one control cycle to the next.
    """

    def __init__(self, cfg: GuidanceConfig | None = None) -> None:
        self.cfg = cfg or GuidanceConfig()
        self.mode = GuidanceMode.IDLE
        self.progress = TrackProgress()
        self._last_regime: Optional[ApproachRegime] = None

    def set_mode(self, mode: GuidanceMode) -> None:
        if mode != self.mode:
            logger.info("guidance mode %s -> %s", self.mode.name, mode.name)
        if mode == GuidanceMode.TRACK_FOLLOW:
            self.progress.reset()
        self.mode = mode
        self._last_regime = None

    def follow(self, samples: Sequence[Pose], pose: Pose) -> Optional[float]:
        """Correction angle for the unconsumed part of ``samples``, or None."""
        res = track(self.progress.window(samples), pose, self.cfg.light_radius, self.cfg.track.lookahead)
        if res is None:
            return None
        i, correction = res
        self.progress.advance(i)
        return correction

    def approach(self, target: Pose) -> Optional[Tuple[float, float]]:
        """Approach command for a robot-frame target; goes idle once reached."""
        regime = classify(target, self.cfg.light_radius, self.cfg.approach)
        if regime != self._last_regime:
            logger.debug("approach regime %s", regime.value)
            self._last_regime = regime
        cmd = goto(target, self.cfg.light_radius, self.cfg.approach)
        if cmd is None:
            self.set_mode(GuidanceMode.IDLE)
        return cmd

    def step(
        self,
        pose: Pose,
        samples: Sequence[Pose] | None = None,
        target: Pose | None = None,
    ):
        """Run whichever algorithm the current mode selects.

        ``samples`` and ``target`` are in the world frame. Returns the correction
        angle in TRACK_FOLLOW, the (speed, rate) command in GOTO and None when
        idle or when the active algorithm has no signal.
        """
        if self.mode == GuidanceMode.TRACK_FOLLOW:
            if samples is None:
                raise ValueError("track following needs track samples")
            return self.follow(samples, pose)
        if self.mode == GuidanceMode.GOTO:
            if target is None:
                raise ValueError("point approach needs a target pose")
            return self.approach(pose.inverse() * target)
        return None
