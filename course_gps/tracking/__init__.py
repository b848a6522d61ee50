from .engine import OUTSIDE_BOUNDARY_ADVISORY, LocationUpdate, process_fix
from .runtime import RoundRegistry, RoundTracker, get_round_registry

__all__ = [
    "LocationUpdate",
    "OUTSIDE_BOUNDARY_ADVISORY",
    "RoundRegistry",
    "RoundTracker",
    "get_round_registry",
    "process_fix",
]
