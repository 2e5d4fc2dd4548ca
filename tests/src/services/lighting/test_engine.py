"""
Unit tests for the LightingPolicyEngine facade.

Tests cover:
- calculate() bundles lighting, notification and stress response settings
- calculate_from_document() validation and error propagation
- Shared engine instance and module-level helper
- Determinism and the serialized payload shape
"""

import logging

import pytest

from src.lib.exceptions import InvalidProfileError
from src.services.lighting import sensitivity
from src.services.lighting import (
    LightingPolicyEngine,
    ProfileSettings,
    Range,
    calculate_profile_settings,
    compose_lighting_settings,
    derive_notification_settings,
    derive_stress_response_settings,
    get_lighting_policy_engine,
)

# =============================================================================
# TestCalculate
# =============================================================================

class TestCalculate:
    """Test the combined calculation."""

    def test_bundles_all_three_records(self, engine, full_profile):
        """calculate() returns the three independent derivations."""
        settings = engine.calculate(full_profile)
        assert isinstance(settings, ProfileSettings)
        assert settings.lighting == compose_lighting_settings(full_profile)
        assert settings.notifications == derive_notification_settings(full_profile)
        assert settings.stress_response == derive_stress_response_settings(full_profile)

    def test_full_profile_values(self, engine, full_profile):
        """Spot-check the full questionnaire profile end to end."""
        settings = engine.calculate(full_profile)
        default = settings.lighting.default
        assert default.brightness == Range(60, 100)
        assert default.color_temp == Range(2700, 2700)
        assert default.flicker_free is True
        assert settings.lighting.calm_mode is not None
        assert settings.lighting.task_mode is not None
        assert set(settings.lighting.time_based) == {"morning", "afternoon", "evening"}
        assert set(settings.lighting.location_based) == {"home", "workplace"}
        assert settings.notifications.notify_on_significant_change is True
        assert settings.notifications.check_in_interval_minutes == 60
        assert settings.notifications.allow_manual_override is True
        assert settings.notifications.track_effectiveness is False
        assert settings.stress_response.gradual_dimming is True
        assert settings.stress_response.undo_timeout_seconds == 30
        assert settings.stress_response.automatic_adjustments is False

    def test_minimal_profile(self, engine, minimal_profile):
        """A sensitivity-only profile calculates without error."""
        settings = engine.calculate(minimal_profile)
        assert settings.lighting.calm_mode is None
        assert settings.lighting.task_mode is None
        assert settings.lighting.time_based == {}
        assert settings.lighting.location_based == {}

    def test_deterministic(self, engine, full_profile):
        """Two calls on the same profile are identical."""
        assert engine.calculate(full_profile) == engine.calculate(full_profile)
        assert engine.calculate(full_profile).to_dict() == engine.calculate(full_profile).to_dict()

    def test_bundle_hashable(self, engine, full_profile):
        """Equal bundles hash equally."""
        assert hash(engine.calculate(full_profile)) == hash(engine.calculate(full_profile))

    def test_sensitivity_resolved_once(self, engine, full_profile, monkeypatch):
        """The score is resolved once per calculation, by the composer."""
        calls = []
        original = sensitivity.resolve_sensitivity_level

        def counting(score):
            calls.append(score)
            return original(score)

        monkeypatch.setattr(sensitivity, "resolve_sensitivity_level", counting)
        engine.calculate(full_profile)
        assert calls == [4]

    def test_calculation_logged(self, engine, full_profile, caplog):
        """Each calculation logs the score it ran with."""
        with caplog.at_level(logging.DEBUG, logger="src.services.lighting"):
            engine.calculate(full_profile)
        assert "lighting_policy_calculate sensitivity=4" in caplog.text


# =============================================================================
# TestCalculateFromDocument
# =============================================================================

class TestCalculateFromDocument:
    """Test document validation through the engine."""

    def test_document_matches_profile(self, engine, full_document, full_profile):
        """A stored document yields the same settings as its validated profile."""
        assert engine.calculate_from_document(full_document) == engine.calculate(full_profile)

    @pytest.mark.parametrize("sensitivity", [0, 6, None])
    def test_invalid_sensitivity_propagates(self, engine, sensitivity):
        """InvalidProfileError reaches the caller untouched."""
        with pytest.raises(InvalidProfileError):
            engine.calculate_from_document({"lightSensitivity": sensitivity})

    def test_missing_sensitivity_propagates(self, engine, full_document):
        """Removing the required answer fails the whole calculation."""
        del full_document["lightSensitivity"]
        with pytest.raises(InvalidProfileError):
            engine.calculate_from_document(full_document)


# =============================================================================
# TestSharedEngine
# =============================================================================

class TestSharedEngine:
    """Test the shared instance helpers."""

    def test_get_engine_is_singleton(self):
        """get_lighting_policy_engine() returns one shared instance."""
        assert get_lighting_policy_engine() is get_lighting_policy_engine()
        assert isinstance(get_lighting_policy_engine(), LightingPolicyEngine)

    def test_helper_accepts_document_or_profile(self, full_document, full_profile):
        """calculate_profile_settings() takes either input form."""
        assert calculate_profile_settings(full_document) == calculate_profile_settings(full_profile)


# =============================================================================
# TestSerialization
# =============================================================================

class TestSerialization:
    """Test the payload handed to the settings screen and profile store."""

    def test_top_level_keys(self, engine, minimal_profile):
        """The bundle renders lighting / notifications / stressResponse."""
        assert set(engine.calculate(minimal_profile).to_dict()) == {
            "lighting",
            "notifications",
            "stressResponse",
        }

    def test_empty_sections_render_as_empty_dicts(self, engine, minimal_profile):
        """Sections that did not fire render as {}."""
        lighting = engine.calculate(minimal_profile).to_dict()["lighting"]
        assert lighting["calmMode"] == {}
        assert lighting["taskMode"] == {}
        assert lighting["timeBased"] == {}
        assert lighting["locationBased"] == {}

    def test_default_band_payload(self, engine, minimal_profile):
        """The default band renders brightness, colorTemp and transitionSpeed."""
        lighting = engine.calculate(minimal_profile).to_dict()["lighting"]
        assert lighting["default"] == {
            "brightness": {"min": 100, "max": 150},
            "colorTemp": {"min": 2700, "max": 3500},
            "transitionSpeed": "medium",
        }
