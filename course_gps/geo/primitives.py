"""Great-circle distance, bearing and unit conversion."""

from __future__ import annotations

import math
from typing import Iterable, List, Literal, Tuple

from pydantic import BaseModel, ConfigDict

from course_gps.errors import InvalidCoordinate

EARTH_RADIUS_M = 6_371_000.0

METERS_TO_YARDS = 1.09361
METERS_TO_FEET = 3.28084
METERS_TO_KILOMETERS = 0.001
METERS_TO_MILES = 0.000621371

_COMPASS_16 = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)
_COMPASS_8 = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


class Coordinate(BaseModel):
    """WGS84 position in degrees.

    Range is not enforced on construction; geometry functions validate their
    inputs and raise :class:`InvalidCoordinate` instead of clamping.
    """

    latitude: float
    longitude: float

    model_config = ConfigDict(frozen=True)


class DistanceResult(BaseModel):
    meters: float
    yards: float
    feet: float
    kilometers: float
    miles: float

    model_config = ConfigDict(frozen=True)


class TargetDistance(BaseModel):
    name: str
    distance: DistanceResult
    bearing: float

    model_config = ConfigDict(frozen=True)


def validate_coordinate(point: Coordinate) -> Coordinate:
    lat = point.latitude
    lon = point.longitude
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidCoordinate(lat, lon)
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
        raise InvalidCoordinate(lat, lon)
    return point


def haversine_m(a: Coordinate, b: Coordinate) -> float:
    """Return the unrounded haversine distance between two points in metres."""

    validate_coordinate(a)
    validate_coordinate(b)
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = lat2 - lat1
    dlon = math.radians(b.longitude - a.longitude)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_M * c


def distance(a: Coordinate, b: Coordinate) -> DistanceResult:
    """Distance between ``a`` and ``b`` in every supported unit.

    Metres are rounded to the centimetre before conversion so that the derived
    units do not amplify floating point noise.
    """

    meters = round(haversine_m(a, b), 2)
    return DistanceResult(
        meters=meters,
        yards=meters * METERS_TO_YARDS,
        feet=meters * METERS_TO_FEET,
        kilometers=meters * METERS_TO_KILOMETERS,
        miles=meters * METERS_TO_MILES,
    )


def bearing(a: Coordinate, b: Coordinate) -> float:
    """Initial bearing from ``a`` to ``b`` in degrees, 0 = north, clockwise."""

    validate_coordinate(a)
    validate_coordinate(b)
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlon = math.radians(b.longitude - a.longitude)

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    result = (math.degrees(math.atan2(y, x)) + 360.0) % 360.0
    # (-tiny + 360) % 360 can round up to exactly 360.0
    return 0.0 if result >= 360.0 else result


def bearing_direction(bearing_deg: float, points: Literal[8, 16] = 16) -> str:
    """Compass text for a bearing (``"NNE"``, ``"SW"``...)."""

    table = _COMPASS_16 if points == 16 else _COMPASS_8
    step = 360.0 / len(table)
    index = int(math.floor(((bearing_deg % 360.0) / step) + 0.5)) % len(table)
    return table[index]


def format_golf_distance(
    result: DistanceResult,
    style: Literal["compact", "detailed", "precise"] = "compact",
) -> str:
    yards = round(result.yards)
    if yards < 1:
        return f"{round(result.feet)}ft"
    if style == "detailed":
        return f"{yards} yds ({round(result.meters)}m)"
    if style == "precise" and result.yards < 10:
        return f"{result.yards:.1f} yds"
    return f"{yards} yds"


def distances_to_targets(
    origin: Coordinate, targets: Iterable[Tuple[str, Coordinate]]
) -> List[TargetDistance]:
    """Distance and bearing from ``origin`` to each named target."""

    return [
        TargetDistance(
            name=name,
            distance=distance(origin, point),
            bearing=bearing(origin, point),
        )
        for name, point in targets
    ]


__all__ = [
    "Coordinate",
    "DistanceResult",
    "EARTH_RADIUS_M",
    "METERS_TO_FEET",
    "METERS_TO_KILOMETERS",
    "METERS_TO_MILES",
    "METERS_TO_YARDS",
    "TargetDistance",
    "bearing",
    "bearing_direction",
    "distance",
    "distances_to_targets",
    "format_golf_distance",
    "haversine_m",
    "validate_coordinate",
]
