"""Closed-loop simulation helpers."""

from .dynamics import UnicycleModel, UnicycleState
from .tracks import arc_track, polyline_track, straight_track

__all__ = [
    "UnicycleModel",
    "UnicycleState",
    "arc_track",
    "polyline_track",
    "straight_track",
]
