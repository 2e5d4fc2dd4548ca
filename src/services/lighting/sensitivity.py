"""
Sensitivity Resolver for the Lighting Policy Engine.

Maps the 1-5 light sensitivity score to one of three fixed base bands:

    >= 4   high       60-100 lux   2700-3000 K   slow
    2-3    moderate   100-150 lux  2700-3500 K   medium
    <= 1   low        150-300 lux  2700-4000 K   fast

There is no implicit default: a missing or invalid score raises
InvalidProfileError instead of falling back to the low band.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from src.config.lighting import (
    HIGH_SENSITIVITY_THRESHOLD,
    MODERATE_SENSITIVITY_THRESHOLD,
    SENSITIVITY_BANDS,
    SENSITIVITY_MAX,
    SENSITIVITY_MIN,
)
from src.lib.exceptions import InvalidProfileError
from src.services.lighting.models import LightingBand, SensitivityLevel

logger = logging.getLogger(__name__)

SENSITIVITY_FIELD = "lightSensitivity"

_BANDS: dict[SensitivityLevel, LightingBand] = {
    SensitivityLevel(level): LightingBand.from_bounds(*bounds)
    for level, bounds in SENSITIVITY_BANDS.items()
}


def coerce_sensitivity(value: Any) -> int:
    """
    Coerce a raw questionnaire value to a sensitivity score.

    Accepts ints, integral floats and numeric strings ("3", " 4 ").
    Rejects None, booleans, non-integral numbers, NaN and anything
    outside 1-5.

    Raises:
        ValueError: With a human-readable reason
    """
    if value is None:
        raise ValueError("light sensitivity is required")
    if isinstance(value, bool):
        raise ValueError("light sensitivity must be a number, not a boolean")

    if isinstance(value, str):
        try:
            number: float = float(value.strip())
        except ValueError:
            raise ValueError("light sensitivity must be a number") from None
    elif isinstance(value, (int, float)):
        number = value
    else:
        raise ValueError("light sensitivity must be a number")

    if isinstance(number, float) and (math.isnan(number) or not number.is_integer()):
        raise ValueError("light sensitivity must be a whole number")

    score = int(number)
    if not SENSITIVITY_MIN <= score <= SENSITIVITY_MAX:
        raise ValueError(
            f"light sensitivity must be between {SENSITIVITY_MIN} and {SENSITIVITY_MAX}"
        )
    return score


def validate_sensitivity(value: Any) -> int:
    """
    Validate a sensitivity score.

    Raises:
        InvalidProfileError: If the score is missing, non-numeric or out of range
    """
    try:
        return coerce_sensitivity(value)
    except ValueError as exc:
        logger.warning("profile_rejected field=%s reason=%s", SENSITIVITY_FIELD, exc)
        raise InvalidProfileError(SENSITIVITY_FIELD, value, str(exc)) from exc


def resolve_sensitivity_level(score: Any) -> SensitivityLevel:
    """Map a 1-5 score to its sensitivity level."""
    score = validate_sensitivity(score)
    if score >= HIGH_SENSITIVITY_THRESHOLD:
        return SensitivityLevel.HIGH
    if score >= MODERATE_SENSITIVITY_THRESHOLD:
        return SensitivityLevel.MODERATE
    return SensitivityLevel.LOW


def resolve_sensitivity_band(score: Any) -> LightingBand:
    """Base lighting band for a 1-5 score."""
    return _BANDS[resolve_sensitivity_level(score)]


__all__ = [
    "SENSITIVITY_FIELD",
    "coerce_sensitivity",
    "validate_sensitivity",
    "resolve_sensitivity_level",
    "resolve_sensitivity_band",
]
