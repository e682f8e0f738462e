"""Light-spot guidance core: track following and point approach."""

from .config import ApproachConfig, GuidanceConfig, TrackConfig
from .geometry import Pose
from .control import goto, track, track_local
from .navigation import Guidance, GuidanceMode

__all__ = [
    "ApproachConfig",
    "GuidanceConfig",
    "TrackConfig",
    "Pose",
    "goto",
    "track",
    "track_local",
    "Guidance",
    "GuidanceMode",
]
