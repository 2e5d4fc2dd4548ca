"""
Lighting Policy Engine for Auxa.

Wires the three calculators together for one profile:
- Sensitivity Resolver (sensitivity.py): base band from the 1-5 score
- Settings Composer (composer.py): overrides and clamps
- Notification & Stress Policy (policy.py): cadence and undo policy

The engine is stateless. A single instance can be shared by any number
of concurrent callers; every call is a pure, synchronous computation.

Usage:
    engine = get_lighting_policy_engine()
    settings = engine.calculate_from_document(profile_document)
    payload = settings.to_dict()
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from src.services.lighting.composer import compose_lighting_settings
from src.services.lighting.models import ProfileSettings
from src.services.lighting.policy import (
    derive_notification_settings,
    derive_stress_response_settings,
)
from src.services.lighting.profile import UserProfile

logger = logging.getLogger(__name__)


class LightingPolicyEngine:
    """
    Derives lighting, notification and stress response settings.

    Raises InvalidProfileError only for an invalid light sensitivity
    score; every other questionnaire answer is optional.
    """

    def calculate(self, profile: UserProfile) -> ProfileSettings:
        """
        Derive all settings for a validated profile.

        Args:
            profile: Validated user profile

        Returns:
            ProfileSettings bundle (lighting, notifications, stress response)
        """
        logger.debug("lighting_policy_calculate sensitivity=%d", profile.light_sensitivity)

        return ProfileSettings(
            lighting=compose_lighting_settings(profile),
            notifications=derive_notification_settings(profile),
            stress_response=derive_stress_response_settings(profile),
        )

    def calculate_from_document(self, document: Mapping[str, Any]) -> ProfileSettings:
        """
        Validate a stored profile document and derive all settings.

        Raises:
            InvalidProfileError: If lightSensitivity is missing or invalid
        """
        return self.calculate(UserProfile.from_document(document))


# Global instance
_lighting_policy_engine: LightingPolicyEngine | None = None


def get_lighting_policy_engine() -> LightingPolicyEngine:
    """Get the shared LightingPolicyEngine instance."""
    global _lighting_policy_engine
    if _lighting_policy_engine is None:
        _lighting_policy_engine = LightingPolicyEngine()
    return _lighting_policy_engine


def calculate_profile_settings(profile: UserProfile | Mapping[str, Any]) -> ProfileSettings:
    """Derive all settings for a profile or a stored profile document."""
    return get_lighting_policy_engine().calculate(UserProfile.from_document(profile))


__all__ = [
    "LightingPolicyEngine",
    "get_lighting_policy_engine",
    "calculate_profile_settings",
]
