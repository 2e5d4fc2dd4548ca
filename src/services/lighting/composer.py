"""
Settings Composer for the Lighting Policy Engine.

Layers overrides and clamps onto the sensitivity base band as an
immutable pipeline. Each step takes the previous LightingSettings
snapshot and returns a new one:

1. calm mode      (overwhelmedByLight == yes)
2. task mode      (primaryUsage includes Workplace or School)
3. time-based     (lightNeedsChange == yes)
4. location-based (one entry per recognised primaryUsage location)
5. discomfort     (uncomfortableLightTypes clamps on the default band)
6. reactions      (lightReactions clamps on the default band)

Step order is fixed. Clamps only touch ``default`` and read the value
left by the previous clamp, so the tighter bound wins. An inverted
brightness or color temperature range (min > max) is surfaced unchanged
and logged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from src.config.lighting import (
    BRIGHT_WHITE_COLOR_TEMP_MAX,
    BRIGHT_WHITE_TRIGGER,
    CALM_MODE_BAND,
    EMOTIONAL_REACTION_BRIGHTNESS_MAX,
    EMOTIONAL_REACTION_COLOR_TEMP_MIN,
    EMOTIONAL_REACTIONS,
    FLICKER_FREE_TRIGGER,
    LOCATION_BANDS,
    PHYSICAL_REACTION_BRIGHTNESS_MAX,
    PHYSICAL_REACTION_COLOR_TEMP_MAX,
    PHYSICAL_REACTIONS,
    TASK_MODE_BAND,
    TASK_MODE_LOCATIONS,
    TIME_BASED_BANDS,
    is_valid_location,
)
from src.services.lighting.models import LightingBand, LightingSettings, LocationSettings
from src.services.lighting.profile import Answer, UserProfile, tag_labels
from src.services.lighting.sensitivity import resolve_sensitivity_band

logger = logging.getLogger(__name__)

PipelineStep = Callable[[LightingSettings, UserProfile], LightingSettings]

_CALM_MODE = LightingBand.from_bounds(*CALM_MODE_BAND)
_TASK_MODE = LightingBand.from_bounds(*TASK_MODE_BAND)
_TIME_BASED: dict[str, LightingBand] = {
    slot: LightingBand.from_bounds(*bounds) for slot, bounds in TIME_BASED_BANDS.items()
}
_LOCATIONS: dict[str, LocationSettings] = {
    location: LocationSettings(
        default=LightingBand.from_bounds(*bands["default"]),
        evening=LightingBand.from_bounds(*bands["evening"]) if "evening" in bands else None,
    )
    for location, bands in LOCATION_BANDS.items()
}


# =============================================================================
# Override steps
# =============================================================================


def apply_calm_mode(settings: LightingSettings, profile: UserProfile) -> LightingSettings:
    if profile.overwhelmed_by_light != Answer.YES:
        return settings
    return replace(settings, calm_mode=_CALM_MODE)


def apply_task_mode(settings: LightingSettings, profile: UserProfile) -> LightingSettings:
    if not TASK_MODE_LOCATIONS.intersection(profile.primary_usage):
        return settings
    return replace(settings, task_mode=_TASK_MODE)


def apply_time_based(settings: LightingSettings, profile: UserProfile) -> LightingSettings:
    if profile.light_needs_change != Answer.YES:
        return settings
    return replace(settings, time_based=_TIME_BASED)


def apply_location_based(settings: LightingSettings, profile: UserProfile) -> LightingSettings:
    locations = dict(settings.location_based)
    for label in profile.primary_usage:
        if is_valid_location(label):
            key = label.lower()
            locations[key] = _LOCATIONS[key]
    if locations == settings.location_based:
        return settings
    return replace(settings, location_based=locations)


# =============================================================================
# Clamp steps (default band only)
# =============================================================================


def apply_discomfort_clamps(settings: LightingSettings, profile: UserProfile) -> LightingSettings:
    light_types = tag_labels(profile.uncomfortable_light_types)
    default = settings.default

    if FLICKER_FREE_TRIGGER in light_types:
        default = replace(default, flicker_free=True)
    if BRIGHT_WHITE_TRIGGER in light_types:
        default = replace(default, color_temp=default.color_temp.clamp_max(BRIGHT_WHITE_COLOR_TEMP_MAX))

    return replace(settings, default=default)


def apply_reaction_clamps(settings: LightingSettings, profile: UserProfile) -> LightingSettings:
    reactions = tag_labels(profile.light_reactions)
    default = settings.default

    if PHYSICAL_REACTIONS & reactions:
        default = replace(
            default,
            color_temp=default.color_temp.clamp_max(PHYSICAL_REACTION_COLOR_TEMP_MAX),
            brightness=default.brightness.clamp_max(PHYSICAL_REACTION_BRIGHTNESS_MAX),
        )
    if EMOTIONAL_REACTIONS & reactions:
        default = replace(
            default,
            color_temp=default.color_temp.raise_min(EMOTIONAL_REACTION_COLOR_TEMP_MIN),
            brightness=default.brightness.clamp_max(EMOTIONAL_REACTION_BRIGHTNESS_MAX),
        )

    return replace(settings, default=default)


# Order matters: clamps run last and in this order
PIPELINE: tuple[PipelineStep, ...] = (
    apply_calm_mode,
    apply_task_mode,
    apply_time_based,
    apply_location_based,
    apply_discomfort_clamps,
    apply_reaction_clamps,
)


def compose_lighting_settings(profile: UserProfile) -> LightingSettings:
    """
    Compose the full lighting configuration for a profile.

    Args:
        profile: Validated user profile

    Returns:
        LightingSettings with the clamped default band and any overrides

    Raises:
        InvalidProfileError: If the profile's sensitivity score is invalid
    """
    settings = LightingSettings(default=resolve_sensitivity_band(profile.light_sensitivity))
    for step in PIPELINE:
        settings = step(settings, profile)

    for name in ("brightness", "color_temp"):
        bound = getattr(settings.default, name)
        if bound.is_inverted:
            # Surfaced unchanged
            logger.info(
                "lighting_range_inverted field=%s min=%d max=%d", name, bound.min, bound.max
            )

    logger.debug(
        "lighting_settings_composed calm_mode=%s task_mode=%s time_based=%s locations=%s",
        settings.calm_mode is not None,
        settings.task_mode is not None,
        bool(settings.time_based),
        ",".join(settings.location_based),
    )
    return settings


__all__ = [
    "PipelineStep",
    "PIPELINE",
    "apply_calm_mode",
    "apply_task_mode",
    "apply_time_based",
    "apply_location_based",
    "apply_discomfort_clamps",
    "apply_reaction_clamps",
    "compose_lighting_settings",
]
