"""Track-follow estimator and point-approach controller."""

from .track_follow import engaged_segment, track, track_local
from .approach import ApproachRegime, classify, goto

__all__ = [
    "engaged_segment",
    "track",
    "track_local",
    "ApproachRegime",
    "classify",
    "goto",
]
