"""
Lighting Policy Data Models.

Immutable value objects produced by the lighting policy engine:
ranges, lighting bands, the composed LightingSettings record and the
flat notification / stress response records.

Every object is a frozen dataclass. Pipeline steps never mutate a
snapshot; they return a new one via ``dataclasses.replace``.

``to_dict()`` renders the camelCase shape the settings screen and the
profile store consume.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import StrEnum
from types import MappingProxyType
from typing import Any

# =============================================================================
# Enums
# =============================================================================


class SensitivityLevel(StrEnum):
    """Sensitivity band derived from the 1-5 questionnaire score."""

    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"


class TransitionSpeed(StrEnum):
    """How quickly lights move between brightness / color targets."""

    VERY_SLOW = "very_slow"
    SLOW = "slow"
    MEDIUM = "medium"
    FAST = "fast"


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class Range:
    """Inclusive min/max bound (lux or Kelvin).

    Clamps only ever tighten a bound. An inverted range (min > max) is a
    legal value and is kept as-is.
    """

    min: int
    max: int

    @property
    def is_inverted(self) -> bool:
        return self.min > self.max

    def clamp_max(self, limit: int) -> Range:
        """Lower the upper bound to ``limit`` if it is above it."""
        return replace(self, max=min(self.max, limit))

    def raise_min(self, limit: int) -> Range:
        """Raise the lower bound to ``limit`` if it is below it."""
        return replace(self, min=max(self.min, limit))

    def to_dict(self) -> dict[str, int]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class LightingBand:
    """Brightness / color temperature target with optional behavior flags."""

    brightness: Range
    color_temp: Range
    transition_speed: TransitionSpeed | None = None
    flicker_free: bool | None = None

    @classmethod
    def from_bounds(
        cls,
        brightness: tuple[int, int],
        color_temp: tuple[int, int],
        transition_speed: str | None = None,
    ) -> LightingBand:
        """Build a band from (min, max) config tuples."""
        return cls(
            brightness=Range(*brightness),
            color_temp=Range(*color_temp),
            transition_speed=TransitionSpeed(transition_speed) if transition_speed else None,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "brightness": self.brightness.to_dict(),
            "colorTemp": self.color_temp.to_dict(),
        }
        if self.transition_speed is not None:
            data["transitionSpeed"] = self.transition_speed.value
        if self.flicker_free is not None:
            data["flickerFree"] = self.flicker_free
        return data


@dataclass(frozen=True)
class LocationSettings:
    """Lighting bands for one usage location."""

    default: LightingBand
    evening: LightingBand | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"default": self.default.to_dict()}
        if self.evening is not None:
            data["evening"] = self.evening.to_dict()
        return data


@dataclass(frozen=True)
class LightingSettings:
    """Composed lighting configuration for one profile.

    ``calm_mode`` / ``task_mode`` are None and ``time_based`` /
    ``location_based`` are empty when the corresponding rule did not fire.
    Both mappings are stored as read-only views, so a snapshot stays
    hashable and cannot be edited in place.
    """

    default: LightingBand
    calm_mode: LightingBand | None = None
    task_mode: LightingBand | None = None
    time_based: Mapping[str, LightingBand] = field(default_factory=dict)
    location_based: Mapping[str, LocationSettings] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only copies; frozen, so set through object.__setattr__
        for name in ("time_based", "location_based"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    def __hash__(self) -> int:
        return hash(
            (
                self.default,
                self.calm_mode,
                self.task_mode,
                tuple(self.time_based.items()),
                tuple(self.location_based.items()),
            )
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "default": self.default.to_dict(),
            "calmMode": self.calm_mode.to_dict() if self.calm_mode else {},
            "taskMode": self.task_mode.to_dict() if self.task_mode else {},
            "timeBased": {slot: band.to_dict() for slot, band in self.time_based.items()},
            "locationBased": {
                location: settings.to_dict()
                for location, settings in self.location_based.items()
            },
        }


@dataclass(frozen=True)
class NotificationSettings:
    """When and how often the user hears about lighting adjustments."""

    notify_on_adjustment: bool
    notify_on_significant_change: bool
    check_in_interval_minutes: int
    allow_manual_override: bool
    track_effectiveness: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "notifyOnAdjustment": self.notify_on_adjustment,
            "notifyOnSignificantChange": self.notify_on_significant_change,
            "checkInInterval": self.check_in_interval_minutes,
            "allowManualOverride": self.allow_manual_override,
            "trackEffectiveness": self.track_effectiveness,
        }


@dataclass(frozen=True)
class StressResponseSettings:
    """Automatic-adjustment and undo policy when the user is stressed."""

    enable_calm_mode: bool
    gradual_dimming: bool
    undo_timeout_seconds: int
    automatic_adjustments: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "enableCalmMode": self.enable_calm_mode,
            "gradualDimming": self.gradual_dimming,
            "undoTimeout": self.undo_timeout_seconds,
            "automaticAdjustments": self.automatic_adjustments,
        }


@dataclass(frozen=True)
class ProfileSettings:
    """All three derived records for one profile."""

    lighting: LightingSettings
    notifications: NotificationSettings
    stress_response: StressResponseSettings

    def to_dict(self) -> dict[str, Any]:
        return {
            "lighting": self.lighting.to_dict(),
            "notifications": self.notifications.to_dict(),
            "stressResponse": self.stress_response.to_dict(),
        }


__all__ = [
    "SensitivityLevel",
    "TransitionSpeed",
    "Range",
    "LightingBand",
    "LocationSettings",
    "LightingSettings",
    "NotificationSettings",
    "StressResponseSettings",
    "ProfileSettings",
]
