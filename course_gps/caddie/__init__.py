from .clubs import (
    CLUB_TABLE,
    ClubOption,
    ClubRange,
    PlayConditions,
    approach_shot_type,
    club_options,
    club_rank,
    recommend_club,
)
from .suggestion import ClubSuggestion, GolfDistanceContext, golf_distance_context, suggest_club
from .wind import wind_adjustment, wind_components

__all__ = [
    "CLUB_TABLE",
    "ClubOption",
    "ClubRange",
    "ClubSuggestion",
    "GolfDistanceContext",
    "PlayConditions",
    "approach_shot_type",
    "club_options",
    "club_rank",
    "golf_distance_context",
    "recommend_club",
    "suggest_club",
    "wind_adjustment",
    "wind_components",
]
