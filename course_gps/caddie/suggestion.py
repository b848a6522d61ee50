from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from course_gps.config import EngineSettings, resolve_settings
from course_gps.geo import Coordinate, DistanceResult, bearing, distance

from .clubs import PlayConditions, recommend_club
from .wind import wind_adjustment


class ClubSuggestion(BaseModel):
    distance_yards: float = Field(alias="distanceYards")
    recommended_club: str = Field(alias="recommendedClub")
    wind_adjusted_distance: Optional[float] = Field(
        default=None, alias="windAdjustedDistance"
    )
    wind_adjustment_yards: Optional[float] = Field(
        default=None, alias="windAdjustmentYards"
    )
    bearing_deg: float = Field(alias="bearingDeg")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class GolfDistanceContext(BaseModel):
    distance_to_target: DistanceResult = Field(alias="distanceToTarget")
    bearing_deg: float = Field(alias="bearingDeg")
    is_within_golf_range: bool = Field(alias="isWithinGolfRange")
    recommended_club: str = Field(alias="recommendedClub")
    wind_adjustment_yards: Optional[float] = Field(
        default=None, alias="windAdjustmentYards"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)


def suggest_club(
    player: Coordinate,
    target: Coordinate,
    wind_speed: Optional[float] = None,
    wind_direction: Optional[float] = None,
    *,
    conditions: Optional[PlayConditions] = None,
    settings: EngineSettings | None = None,
) -> ClubSuggestion:
    """Club for the shot from ``player`` to ``target``.

    Wind is only applied when both speed and direction are known; the club is
    then picked for the wind adjusted distance.
    """

    yards = distance(player, target).yards
    shot_bearing = bearing(player, target)
    adjustment: Optional[float] = None
    adjusted: Optional[float] = None
    if wind_speed is not None and wind_direction is not None:
        adjustment = wind_adjustment(yards, shot_bearing, wind_speed, wind_direction, settings)
        adjusted = yards + adjustment
    club = recommend_club(adjusted if adjusted is not None else yards, conditions)
    return ClubSuggestion(
        distance_yards=yards,
        recommended_club=club,
        wind_adjusted_distance=adjusted,
        wind_adjustment_yards=adjustment,
        bearing_deg=shot_bearing,
    )


def golf_distance_context(
    player: Coordinate,
    target: Coordinate,
    wind_speed: Optional[float] = None,
    wind_direction: Optional[float] = None,
    settings: EngineSettings | None = None,
) -> GolfDistanceContext:
    cfg = resolve_settings(settings)
    result = distance(player, target)
    shot_bearing = bearing(player, target)
    adjustment = None
    if wind_speed is not None and wind_direction is not None:
        adjustment = wind_adjustment(result.yards, shot_bearing, wind_speed, wind_direction, cfg)
    return GolfDistanceContext(
        distance_to_target=result,
        bearing_deg=shot_bearing,
        is_within_golf_range=result.yards <= cfg.golf_range_max_yards,
        recommended_club=recommend_club(result.yards),
        wind_adjustment_yards=adjustment,
    )


__all__ = ["ClubSuggestion", "GolfDistanceContext", "golf_distance_context", "suggest_club"]
