from __future__ import annotations

import pytest

from course_gps.caddie import (
    PlayConditions,
    approach_shot_type,
    club_options,
    club_rank,
    golf_distance_context,
    recommend_club,
    suggest_club,
    wind_adjustment,
    wind_components,
)
from course_gps.config import EngineSettings

from .conftest import pt


@pytest.mark.parametrize(
    "yards,club",
    [
        (10, "Putter"),
        (50, "LW"),
        (100, "PW"),
        (150, "5-Iron"),
        (200, "5-Wood"),
        (300, "Driver"),
    ],
)
def test_recommend_club_table(yards, club) -> None:
    assert recommend_club(yards) == club


def test_recommend_club_tie_goes_to_longer_club() -> None:
    # 156 is 6 yds from both the 4-Iron (162) and 5-Iron (150) stock carries
    assert recommend_club(156) == "4-Iron"


def test_recommend_club_is_monotonic() -> None:
    ranks = [club_rank(recommend_club(yards)) for yards in (50, 100, 150, 200, 300)]

    assert ranks == sorted(ranks)
    assert len(set(ranks)) == len(ranks)


def test_recommend_club_monotonic_over_full_range() -> None:
    ranks = [club_rank(recommend_club(yards)) for yards in range(0, 400, 5)]
    assert all(later >= earlier for earlier, later in zip(ranks, ranks[1:]))


def test_out_of_table_distances_clamp() -> None:
    assert recommend_club(420) == "Driver"
    assert recommend_club(-5) == "Putter"
    # gap between the putter and lob wedge windows goes to the longer club
    assert recommend_club(35) == "LW"


def test_recommend_club_rejects_nan() -> None:
    with pytest.raises(ValueError):
        recommend_club(float("nan"))


def test_conditions_adjust_distance() -> None:
    assert recommend_club(100, PlayConditions(wind="headwind")) == "9-Iron"
    assert recommend_club(100, PlayConditions(wind="tailwind", elevation="downhill")) == "SW"
    assert recommend_club(100, PlayConditions(wind="calm", pin="middle")) == "PW"


def test_club_options_ranked() -> None:
    options = club_options(150)

    assert [option.club for option in options] == ["5-Iron", "6-Iron", "4-Iron"]
    assert options[0].confidence == 100
    assert options[0].shot == "full"
    assert options[1].shot == "hard"
    assert options[2].shot == "easy"


def test_club_options_out_of_range() -> None:
    assert club_options(400) == []


@pytest.mark.parametrize(
    "yards,label",
    [(3, "Tap-in"), (25, "Long putt"), (70, "Pitch shot"), (160, "Mid iron"), (260, "Approach shot")],
)
def test_approach_shot_type(yards, label) -> None:
    assert approach_shot_type(yards) == label


def test_wind_components_direction() -> None:
    head, cross = wind_components(10.0, 0.0, 0.0)
    assert head == pytest.approx(10.0)
    assert cross == pytest.approx(0.0, abs=1e-9)

    head, cross = wind_components(10.0, 90.0, 0.0)
    assert head == pytest.approx(0.0, abs=1e-9)
    assert cross == pytest.approx(10.0)


def test_wind_adjustment_sign_and_scale() -> None:
    assert wind_adjustment(150, 0.0, 10.0, 0.0) == 3.0
    assert wind_adjustment(150, 0.0, 10.0, 180.0) == -3.0
    assert wind_adjustment(150, 0.0, 10.0, 90.0) == 0.0
    # distance factor is capped at 1.5
    assert wind_adjustment(300, 0.0, 20.0, 0.0) == 9.0
    assert wind_adjustment(600, 0.0, 20.0, 0.0) == 9.0
    assert wind_adjustment(75, 0.0, 20.0, 0.0) == 3.0


def test_wind_adjustment_factor_setting() -> None:
    settings = EngineSettings(wind_adjustment_factor=0.6)
    assert wind_adjustment(150, 0.0, 10.0, 0.0, settings) == 6.0


def test_suggest_club_without_wind() -> None:
    suggestion = suggest_club(pt(0.0, 0.0), pt(0.0, 0.0013))

    assert suggestion.distance_yards == pytest.approx(158.1, abs=0.1)
    assert suggestion.recommended_club == "4-Iron"
    assert suggestion.wind_adjusted_distance is None
    assert suggestion.bearing_deg == pytest.approx(90.0)


def test_suggest_club_with_head_and_tail_wind() -> None:
    into = suggest_club(pt(0.0, 0.0), pt(0.0, 0.0013), wind_speed=30.0, wind_direction=90.0)
    down = suggest_club(pt(0.0, 0.0), pt(0.0, 0.0013), wind_speed=30.0, wind_direction=270.0)

    assert into.wind_adjustment_yards == 9.0
    assert into.wind_adjusted_distance == pytest.approx(into.distance_yards + 9.0)
    assert into.recommended_club == recommend_club(into.wind_adjusted_distance)
    assert down.wind_adjustment_yards == -9.0
    assert down.recommended_club == recommend_club(down.wind_adjusted_distance)


def test_suggest_club_needs_both_wind_values() -> None:
    suggestion = suggest_club(pt(0.0, 0.0), pt(0.0, 0.0013), wind_speed=12.0)
    assert suggestion.wind_adjustment_yards is None


def test_golf_distance_context() -> None:
    near = golf_distance_context(pt(0.0, 0.0), pt(0.0, 0.0013), wind_speed=10.0, wind_direction=90.0)
    far = golf_distance_context(pt(0.0, 0.0), pt(0.0, 0.004))

    assert near.is_within_golf_range
    assert near.recommended_club == "4-Iron"
    assert near.wind_adjustment_yards == 3.0
    assert not far.is_within_golf_range
    assert far.wind_adjustment_yards is None
    assert "isWithinGolfRange" in far.model_dump(by_alias=True)
