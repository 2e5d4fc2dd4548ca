"""
Notification & Stress Policy for the Lighting Policy Engine.

Two independent derivations from the same profile. Neither reads the
composed lighting settings, so they can run in any order relative to
the Settings Composer.
"""

from __future__ import annotations

from src.config.lighting import (
    CHECK_IN_INTERVAL_DEFAULT_MINUTES,
    CHECK_IN_INTERVAL_LOW_AWARENESS_MINUTES,
    GRADUAL_DIMMING_COPING_METHODS,
    UNDO_TIMEOUT_SECONDS,
)
from src.services.lighting.models import NotificationSettings, StressResponseSettings
from src.services.lighting.profile import (
    AdjustmentComfort,
    Answer,
    NotificationPreference,
    StressAwareness,
    UserProfile,
    tag_labels,
)

# Users who rarely notice their stress get checked on less often
_LOW_AWARENESS = (StressAwareness.RARELY, StressAwareness.NEVER)


def derive_notification_settings(profile: UserProfile) -> NotificationSettings:
    """Derive notification cadence from the profile."""
    if profile.stress_awareness in _LOW_AWARENESS:
        check_in_interval = CHECK_IN_INTERVAL_LOW_AWARENESS_MINUTES
    else:
        check_in_interval = CHECK_IN_INTERVAL_DEFAULT_MINUTES

    return NotificationSettings(
        notify_on_adjustment=profile.notification_preference == NotificationPreference.ALWAYS,
        notify_on_significant_change=(
            profile.notification_preference == NotificationPreference.ONLY_SOMETIMES
        ),
        check_in_interval_minutes=check_in_interval,
        allow_manual_override=profile.manual_override == Answer.YES,
        track_effectiveness=profile.track_effectiveness == Answer.YES,
    )


def derive_stress_response_settings(profile: UserProfile) -> StressResponseSettings:
    """Derive automatic-adjustment and undo policy from the profile."""
    comfort = profile.comfort_with_adjustments
    return StressResponseSettings(
        enable_calm_mode=profile.overwhelmed_by_light == Answer.YES,
        gradual_dimming=bool(
            GRADUAL_DIMMING_COPING_METHODS & tag_labels(profile.stress_coping_methods)
        ),
        undo_timeout_seconds=(
            UNDO_TIMEOUT_SECONDS if comfort == AdjustmentComfort.ONLY_IF_I_CAN_UNDO_IT else 0
        ),
        automatic_adjustments=comfort == AdjustmentComfort.YES,
    )


__all__ = ["derive_notification_settings", "derive_stress_response_settings"]
