"""
Shared test fixtures for Auxa.

This module provides common fixtures used across all test modules:
- Environment setup (production-style logging config)
- Profile documents as stored by the profile store (camelCase keys)
- Validated UserProfile instances
- LightingPolicyEngine instance

Usage:
    All fixtures are automatically available to any test in the tests/ directory.
"""

from __future__ import annotations

import os
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# 1. Environment setup -- must run before any application imports
# ---------------------------------------------------------------------------

os.environ.setdefault("AUXA_DEV_MODE", "0")
os.environ.setdefault("LOG_LEVEL", "INFO")

# ---------------------------------------------------------------------------
# Application imports (after env vars are set)
# ---------------------------------------------------------------------------

from src.services.lighting import LightingPolicyEngine, UserProfile  # noqa: E402

# ---------------------------------------------------------------------------
# 2. Profile documents
# ---------------------------------------------------------------------------


@pytest.fixture()
def minimal_document() -> dict[str, Any]:
    """Profile document with only the required sensitivity answer."""
    return {"lightSensitivity": 3}


@pytest.fixture()
def full_document() -> dict[str, Any]:
    """
    Profile document as saved by the onboarding questionnaire.

    Includes keys the engine does not use (name, dateOfBirth, ...) so
    tests exercise the ignore-unknown-keys contract.
    """
    return {
        "name": "Sam",
        "dateOfBirth": "1990-04-12",
        "diagnosisType": "autism",
        "lightSensitivity": 4,
        "overwhelmedByLight": "yes",
        "primaryUsage": ["Home", "Workplace"],
        "lightNeedsChange": "yes",
        "uncomfortableLightTypes": ["Flickering lights", "Bright white"],
        "lightReactions": ["Headaches"],
        "notificationPreference": "only_sometimes",
        "stressAwareness": "rarely",
        "manualOverride": "yes",
        "trackEffectiveness": "no",
        "stressCopingMethods": ["Leave the room"],
        "comfortWithAdjustments": "only_if_i_can_undo_it",
        "preferredLighting": "warm",
        "safeLighting": ["Candles"],
    }


# ---------------------------------------------------------------------------
# 3. Validated profiles and engine
# ---------------------------------------------------------------------------


@pytest.fixture()
def minimal_profile(minimal_document) -> UserProfile:
    """Validated profile with only lightSensitivity=3."""
    return UserProfile.from_document(minimal_document)


@pytest.fixture()
def full_profile(full_document) -> UserProfile:
    """Validated profile with every questionnaire answer filled in."""
    return UserProfile.from_document(full_document)


@pytest.fixture()
def engine() -> LightingPolicyEngine:
    """A fresh LightingPolicyEngine."""
    return LightingPolicyEngine()
