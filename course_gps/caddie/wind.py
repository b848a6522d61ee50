"""Heuristic wind adjustment for a target distance.

This is an explainable rule of thumb, not a ball-flight model: the headwind
component is scaled by an empirical factor and by how long the shot is.
"""

from __future__ import annotations

import math
from typing import Tuple

from course_gps.config import EngineSettings, resolve_settings


def wind_components(
    wind_speed: float, wind_from_deg: float, shot_bearing_deg: float
) -> Tuple[float, float]:
    """Split wind into components along and across the line of play.

    Same decomposition as the plays-like helper in GolfIQ's caddie service.
    Returns ``(along, across)``: ``along`` is positive when the wind comes
    from the target (into the golfer), ``across`` is positive when it comes
    from the right of the target line.
    """

    offset = math.radians((wind_from_deg - shot_bearing_deg) % 360.0)
    along = wind_speed * math.cos(offset)
    across = wind_speed * math.sin(offset)
    return along, across


def wind_adjustment(
    distance_yards: float,
    shot_bearing: float,
    wind_speed: float,
    wind_direction: float,
    settings: EngineSettings | None = None,
) -> float:
    """Signed yards to add to the target distance.

    ``wind_direction`` is where the wind blows from, so a positive result is a
    headwind (the shot plays longer) and a negative one a tailwind.
    """

    cfg = resolve_settings(settings)
    along, _ = wind_components(wind_speed, wind_direction, shot_bearing)
    distance_factor = min(distance_yards / cfg.wind_distance_scale_yards, cfg.wind_distance_factor_cap)
    return float(round(along * cfg.wind_adjustment_factor * distance_factor))


__all__ = ["wind_adjustment", "wind_components"]
