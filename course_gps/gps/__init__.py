from .models import GpsAssessment, GpsQuality, LocationFix
from .quality import classify, is_low_confidence
from .stability import GpsStabilityTracker

__all__ = [
    "GpsAssessment",
    "GpsQuality",
    "GpsStabilityTracker",
    "LocationFix",
    "classify",
    "is_low_confidence",
]
