"""
Services for Auxa.

Services:
    - LightingPolicyEngine: Maps sensory questionnaire answers to lighting,
      notification and stress response settings
"""

from .lighting import (
    LightingPolicyEngine,
    calculate_profile_settings,
    get_lighting_policy_engine,
)

__all__ = [
    "LightingPolicyEngine",
    "get_lighting_policy_engine",
    "calculate_profile_settings",
]
