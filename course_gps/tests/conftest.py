"""Shared pytest fixtures for engine tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from course_gps.config import EngineSettings, reset_settings_cache
from course_gps.courses import CourseGeometry, GeoPolygon, HazardGeometry, HoleGeometry
from course_gps.geo import Coordinate
from course_gps.gps import LocationFix

T0 = datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)


def pt(lat: float, lon: float) -> Coordinate:
    return Coordinate(latitude=lat, longitude=lon)


def rect(lat_min: float, lat_max: float, lon_min: float, lon_max: float) -> list[Coordinate]:
    return [
        pt(lat_min, lon_min),
        pt(lat_min, lon_max),
        pt(lat_max, lon_max),
        pt(lat_max, lon_min),
    ]


def build_test_course() -> CourseGeometry:
    """Two holes on the equator; 0.0001 deg is roughly 11 m."""

    return CourseGeometry(
        id="test-links",
        name="Test Links",
        center=pt(0.0, 0.003),
        holes=[
            HoleGeometry(
                number=1,
                par=4,
                tee=pt(0.0, 0.0),
                pin=pt(0.0, 0.0036),
                layout_polygon=GeoPolygon(rings=[rect(-0.0006, 0.0006, -0.0003, 0.0039)]),
                hazards=[
                    HazardGeometry(
                        id="h1-water",
                        type="water",
                        polygon=GeoPolygon(rings=[rect(0.00035, 0.0005, 0.0015, 0.002)]),
                    )
                ],
            ),
            HoleGeometry(
                number=2,
                par=4,
                tee=pt(0.0012, 0.0036),
                pin=pt(0.0012, 0.0),
                fairway_centerline=[pt(0.0012, 0.0036), pt(0.0015, 0.0018), pt(0.0012, 0.0)],
            ),
        ],
    )


@pytest.fixture()
def course() -> CourseGeometry:
    return build_test_course()


@pytest.fixture()
def settings() -> EngineSettings:
    return EngineSettings()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    for name in ("COURSE_GPS_TEE_RADIUS_M", "COURSE_GPS_SHOT_WINDOW_S"):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture()
def make_fix() -> Callable[..., LocationFix]:
    def _make(
        lat: float,
        lon: float,
        seconds: float = 0.0,
        accuracy: float | None = 4.0,
    ) -> LocationFix:
        return LocationFix(
            coordinate=pt(lat, lon),
            accuracy_m=accuracy,
            timestamp=T0 + timedelta(seconds=seconds),
        )

    return _make
