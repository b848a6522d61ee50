"""Exception types raised by the position engine."""

from __future__ import annotations


class CourseGpsError(Exception):
    """Base class for engine errors."""


class InvalidCoordinate(CourseGpsError, ValueError):
    """Latitude/longitude outside the WGS84 range (or not a finite number)."""

    def __init__(self, latitude: float, longitude: float) -> None:
        super().__init__(f"invalid coordinate lat={latitude!r} lon={longitude!r}")
        self.latitude = latitude
        self.longitude = longitude


class InsufficientGeometry(CourseGpsError, LookupError):
    """Course or hole geometry lacks the fields an operation needs.

    Raised by geometry accessors and resolved by the callers through a
    fallback (radius approximation, ``Unknown`` label); it never reaches the
    public API.
    """


class RoundNotFound(CourseGpsError, KeyError):
    pass


__all__ = [
    "CourseGpsError",
    "InsufficientGeometry",
    "InvalidCoordinate",
    "RoundNotFound",
]
