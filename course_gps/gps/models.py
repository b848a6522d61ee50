from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from course_gps.geo import Coordinate

GpsQuality = Literal["Excellent", "Good", "Fair", "Poor"]


class LocationFix(BaseModel):
    """A single reading from the device location provider."""

    coordinate: Coordinate
    accuracy_m: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("accuracy_m", "accuracyMeters")
    )
    heading_deg: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("heading_deg", "headingDegrees")
    )
    speed_mps: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("speed_mps", "speedMps")
    )
    timestamp: datetime

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class GpsAssessment(BaseModel):
    usable: bool
    quality: GpsQuality
    recommendation: str
    accuracy_m: Optional[float] = Field(default=None, alias="accuracyMeters")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


__all__ = ["GpsAssessment", "GpsQuality", "LocationFix"]
