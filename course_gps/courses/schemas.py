from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from course_gps.geo import Coordinate

HazardType = Literal["bunker", "water", "tree", "other"]


class GeoPolygon(BaseModel):
    """Polygon described by rings in WGS84 coordinates, outer ring first."""

    rings: List[List[Coordinate]]

    model_config = ConfigDict(frozen=True)

    @property
    def is_usable(self) -> bool:
        return bool(self.rings) and len(self.rings[0]) >= 3


class HazardGeometry(BaseModel):
    id: str
    type: HazardType = "other"
    name: Optional[str] = None
    polygon: Optional[GeoPolygon] = None

    model_config = ConfigDict(frozen=True)


class HoleGeometry(BaseModel):
    number: int = Field(validation_alias=AliasChoices("number", "holeNumber"))
    tee: Coordinate = Field(validation_alias=AliasChoices("tee", "teePoint"))
    pin: Coordinate = Field(validation_alias=AliasChoices("pin", "pinPoint"))
    par: Optional[int] = None
    layout_polygon: Optional[GeoPolygon] = Field(
        default=None,
        validation_alias=AliasChoices("layout_polygon", "holeLayoutPolygon"),
    )
    fairway_centerline: Optional[List[Coordinate]] = Field(
        default=None,
        validation_alias=AliasChoices("fairway_centerline", "fairwayCenterline"),
    )
    fairway_polygon: Optional[GeoPolygon] = Field(
        default=None,
        validation_alias=AliasChoices("fairway_polygon", "fairwayPolygon"),
    )
    hazards: List[HazardGeometry] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class CourseGeometry(BaseModel):
    """Course layout loaded once per round; the engine never mutates it."""

    id: str
    name: Optional[str] = None
    center: Coordinate
    boundary: Optional[GeoPolygon] = None
    holes: List[HoleGeometry] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


__all__ = [
    "CourseGeometry",
    "GeoPolygon",
    "HazardGeometry",
    "HazardType",
    "HoleGeometry",
]
