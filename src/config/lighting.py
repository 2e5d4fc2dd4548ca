"""
Lighting Band Configuration for Auxa.

Fixed brightness / color-temperature bands used by the lighting policy
engine, plus the questionnaire tags that switch individual rules on.

Brightness is in lux, color temperature in Kelvin. All values are
(min, max) pairs; the engine wraps them in immutable LightingBand
objects at import time.
"""

from __future__ import annotations

from typing import Literal, TypeAlias

# Sensitivity levels (derived from the 1-5 questionnaire score)
SensitivityLevelCode: TypeAlias = Literal["high", "moderate", "low"]

# Valid questionnaire score range (inclusive)
SENSITIVITY_MIN = 1
SENSITIVITY_MAX = 5

# Score thresholds: >= HIGH -> high, >= MODERATE -> moderate, else low
HIGH_SENSITIVITY_THRESHOLD = 4
MODERATE_SENSITIVITY_THRESHOLD = 2

# level -> (brightness, color_temp, transition_speed)
SENSITIVITY_BANDS: dict[SensitivityLevelCode, tuple[tuple[int, int], tuple[int, int], str]] = {
    "high": ((60, 100), (2700, 3000), "slow"),
    "moderate": ((100, 150), (2700, 3500), "medium"),
    "low": ((150, 300), (2700, 4000), "fast"),
}

# Calm mode: maximally dim and warm
CALM_MODE_BAND: tuple[tuple[int, int], tuple[int, int], str] = (
    (60, 60),
    (2700, 2700),
    "very_slow",
)

# Task mode: bright, neutral light for focused work
TASK_MODE_BAND: tuple[tuple[int, int], tuple[int, int], str] = (
    (150, 300),
    (3000, 4000),
    "medium",
)

# Time of day -> (brightness, color_temp). No transition speed.
TIME_BASED_BANDS: dict[str, tuple[tuple[int, int], tuple[int, int]]] = {
    "morning": ((150, 300), (3500, 4000)),
    "afternoon": ((100, 200), (3000, 3500)),
    "evening": ((60, 100), (2700, 3000)),
}

# Location -> sub-band name -> (brightness, color_temp)
LOCATION_BANDS: dict[str, dict[str, tuple[tuple[int, int], tuple[int, int]]]] = {
    "home": {
        "default": ((100, 200), (2700, 3500)),
        "evening": ((60, 100), (2700, 3000)),
    },
    "school": {
        "default": ((150, 300), (3000, 4000)),
    },
    "workplace": {
        "default": ((150, 300), (3000, 4000)),
    },
    "clinic": {
        "default": ((100, 150), (2700, 3000)),
    },
}

# =============================================================================
# Rule triggers
# =============================================================================

# primaryUsage values that enable task mode
TASK_MODE_LOCATIONS: frozenset[str] = frozenset({"Workplace", "School"})

# uncomfortableLightTypes clamps
FLICKER_FREE_TRIGGER = "Flickering lights"
BRIGHT_WHITE_TRIGGER = "Bright white"
BRIGHT_WHITE_COLOR_TEMP_MAX = 3000

# lightReactions clamps
PHYSICAL_REACTIONS: frozenset[str] = frozenset({"Headaches", "Nausea"})
PHYSICAL_REACTION_COLOR_TEMP_MAX = 2700
PHYSICAL_REACTION_BRIGHTNESS_MAX = 100

EMOTIONAL_REACTIONS: frozenset[str] = frozenset({"Anxiety", "Trouble focusing"})
EMOTIONAL_REACTION_COLOR_TEMP_MIN = 3000
EMOTIONAL_REACTION_BRIGHTNESS_MAX = 150

# stressCopingMethods that enable gradual dimming
GRADUAL_DIMMING_COPING_METHODS: frozenset[str] = frozenset(
    {"Turn off lights", "Leave the room"}
)

# Notification / stress response cadence
CHECK_IN_INTERVAL_DEFAULT_MINUTES = 30
CHECK_IN_INTERVAL_LOW_AWARENESS_MINUTES = 60
UNDO_TIMEOUT_SECONDS = 30


def is_valid_location(location: str) -> bool:
    """Check if a location has a configured lighting band (case-insensitive)."""
    return location.lower() in LOCATION_BANDS
