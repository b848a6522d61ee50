from __future__ import annotations

import math

import pytest

from course_gps.errors import InvalidCoordinate
from course_gps.geo import (
    bearing,
    bearing_direction,
    distance,
    distances_to_targets,
    format_golf_distance,
    haversine_m,
)
from course_gps.geo.primitives import METERS_TO_MILES, METERS_TO_YARDS

from .conftest import pt

SAMPLES = [
    (pt(59.3293, 18.0686), pt(59.3300, 18.0700)),
    (pt(37.4318, -122.1610), pt(37.4290, -122.1580)),
    (pt(-33.8688, 151.2093), pt(-33.8700, 151.2100)),
    (pt(0.0, 179.9995), pt(0.0005, -179.9995)),
    (pt(89.9, 0.0), pt(89.9, 90.0)),
]


def test_one_degree_of_latitude_on_equator() -> None:
    result = distance(pt(0.0, 0.0), pt(1.0, 0.0))

    assert result.meters == pytest.approx(111_195, abs=50)
    assert result.kilometers == pytest.approx(111.195, abs=0.05)


@pytest.mark.parametrize("a,b", SAMPLES)
def test_distance_is_symmetric(a, b) -> None:
    assert distance(a, b).meters == pytest.approx(distance(b, a).meters, abs=1e-6)


def test_units_derive_from_rounded_meters() -> None:
    result = distance(pt(0.0, 0.0), pt(0.0, 0.0009))

    assert result.meters == round(result.meters, 2)
    assert result.yards == pytest.approx(result.meters * METERS_TO_YARDS)
    assert result.feet == pytest.approx(result.meters * 3.28084)
    assert result.miles == pytest.approx(result.meters * METERS_TO_MILES)


def test_distance_to_self_is_zero() -> None:
    here = pt(51.5, -0.12)
    assert distance(here, here).meters == 0.0
    assert bearing(here, here) == 0.0


@pytest.mark.parametrize(
    "target,expected",
    [
        (pt(1.0, 0.0), 0.0),
        (pt(0.0, 1.0), 90.0),
        (pt(-1.0, 0.0), 180.0),
        (pt(0.0, -1.0), 270.0),
    ],
)
def test_bearing_cardinal_directions(target, expected) -> None:
    assert bearing(pt(0.0, 0.0), target) == pytest.approx(expected, abs=1e-9)


@pytest.mark.parametrize("a,b", SAMPLES)
def test_bearing_within_range(a, b) -> None:
    for value in (bearing(a, b), bearing(b, a)):
        assert 0.0 <= value < 360.0


@pytest.mark.parametrize(
    "bad",
    [pt(91.0, 0.0), pt(-90.5, 0.0), pt(0.0, 180.1), pt(0.0, -181.0), pt(math.nan, 0.0)],
)
def test_invalid_coordinates_raise(bad) -> None:
    good = pt(0.0, 0.0)
    with pytest.raises(InvalidCoordinate):
        distance(bad, good)
    with pytest.raises(InvalidCoordinate):
        distance(good, bad)
    with pytest.raises(InvalidCoordinate):
        bearing(bad, good)


def test_invalid_coordinate_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        haversine_m(pt(91.0, 0.0), pt(0.0, 0.0))


@pytest.mark.parametrize(
    "value,points,expected",
    [
        (0.0, 16, "N"),
        (22.5, 16, "NNE"),
        (350.0, 16, "N"),
        (180.0, 16, "S"),
        (250.0, 16, "WSW"),
        (44.0, 8, "NE"),
        (300.0, 8, "NW"),
    ],
)
def test_bearing_direction(value, points, expected) -> None:
    assert bearing_direction(value, points) == expected


def test_format_golf_distance_styles() -> None:
    result = distance(pt(0.0, 0.0), pt(0.0, 0.0013))

    assert format_golf_distance(result) == f"{round(result.yards)} yds"
    assert format_golf_distance(result, "detailed").endswith(f"({round(result.meters)}m)")

    short = distance(pt(0.0, 0.0), pt(0.0, 0.00005))
    assert format_golf_distance(short, "precise") == f"{short.yards:.1f} yds"

    tiny = distance(pt(0.0, 0.0), pt(0.0, 0.000003))
    assert format_golf_distance(tiny) == "1ft"


def test_format_golf_distance_uses_rounded_yards_for_feet() -> None:
    # 0.56 m is 0.61 yds, which rounds to a whole yard
    near = distance(pt(0.0, 0.0), pt(0.0, 0.000005))

    assert near.yards < 1
    assert format_golf_distance(near) == "1 yds"


def test_distances_to_targets_keeps_order_and_names() -> None:
    origin = pt(0.0, 0.0)
    results = distances_to_targets(origin, [("front", pt(0.0, 0.001)), ("back", pt(0.0, 0.0012))])

    assert [item.name for item in results] == ["front", "back"]
    assert results[0].distance.meters < results[1].distance.meters
    assert results[0].bearing == pytest.approx(90.0)
