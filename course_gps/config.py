"""Configuration helpers for the position engine heuristics."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """Tunable thresholds.

    All radii and thresholds are empirical values carried over from the field
    app; none of them has a derivation, so they are exposed as settings
    (``COURSE_GPS_<NAME>`` environment variables or a ``.env`` file).
    """

    # position classifier
    tee_radius_m: float = Field(default=30.0, gt=0)
    green_radius_m: float = Field(default=20.0, gt=0)
    fairway_half_width_m: float = Field(default=30.0, gt=0)

    # boundary & hole locator
    boundary_fallback_radius_m: float = Field(default=2000.0, gt=0)
    hole_detect_max_distance_m: float = Field(default=500.0, gt=0)

    # shot detection
    shot_window_s: float = Field(default=10.0, gt=0)
    shot_min_distance_m: float = Field(default=30.0, ge=0)
    shot_accuracy_multiplier: float = Field(default=3.0, ge=0)
    shot_min_speed_mps: float = Field(default=8.0, ge=0)
    default_accuracy_m: float = Field(default=5.0, gt=0)
    suppress_low_confidence_side_effects: bool = True

    # club suggestion / wind
    wind_adjustment_factor: float = 0.3
    wind_distance_scale_yards: float = Field(default=150.0, gt=0)
    wind_distance_factor_cap: float = Field(default=1.5, gt=0)
    golf_range_max_yards: float = Field(default=350.0, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="COURSE_GPS_", env_file=".env", extra="ignore"
    )


@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """Return cached engine settings."""

    return EngineSettings()


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


def resolve_settings(settings: EngineSettings | None) -> EngineSettings:
    return settings if settings is not None else get_settings()


__all__ = [
    "EngineSettings",
    "get_settings",
    "reset_settings_cache",
    "resolve_settings",
]
