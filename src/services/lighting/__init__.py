"""
Lighting Policy Package for Auxa.

Maps a user's sensory-sensitivity questionnaire answers to lighting,
notification and stress response settings:
- Sensitivity Resolver: base band from the 1-5 light sensitivity score
- Settings Composer: calm / task / time / location overrides and clamps
- Notification & Stress Policy: check-in cadence, undo and automation policy

All calculators are pure and stateless; nothing here performs I/O.
"""

from src.services.lighting.composer import compose_lighting_settings
from src.services.lighting.engine import (
    LightingPolicyEngine,
    calculate_profile_settings,
    get_lighting_policy_engine,
)
from src.services.lighting.models import (
    LightingBand,
    LightingSettings,
    LocationSettings,
    NotificationSettings,
    ProfileSettings,
    Range,
    SensitivityLevel,
    StressResponseSettings,
    TransitionSpeed,
)
from src.services.lighting.policy import (
    derive_notification_settings,
    derive_stress_response_settings,
)
from src.services.lighting.profile import (
    AdjustmentComfort,
    Answer,
    CopingMethod,
    LightReaction,
    LightType,
    NotificationPreference,
    StressAwareness,
    UsageLocation,
    UserProfile,
)
from src.services.lighting.sensitivity import (
    resolve_sensitivity_band,
    resolve_sensitivity_level,
    validate_sensitivity,
)

__all__ = [
    # Engine
    "LightingPolicyEngine",
    "get_lighting_policy_engine",
    "calculate_profile_settings",
    # Calculators
    "resolve_sensitivity_level",
    "resolve_sensitivity_band",
    "validate_sensitivity",
    "compose_lighting_settings",
    "derive_notification_settings",
    "derive_stress_response_settings",
    # Profile
    "UserProfile",
    "Answer",
    "NotificationPreference",
    "StressAwareness",
    "AdjustmentComfort",
    "UsageLocation",
    "LightType",
    "LightReaction",
    "CopingMethod",
    # Settings
    "Range",
    "LightingBand",
    "LocationSettings",
    "LightingSettings",
    "NotificationSettings",
    "StressResponseSettings",
    "ProfileSettings",
    "SensitivityLevel",
    "TransitionSpeed",
]
