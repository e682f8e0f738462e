from .guidance import Guidance, GuidanceMode, TrackProgress

__all__ = ["Guidance", "GuidanceMode", "TrackProgress"]
