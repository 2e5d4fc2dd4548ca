"""
Centralized Error Response Builder for Auxa.

Provides consistent error codes, messages, and i18n-ready error responses
for callers that surface engine failures (settings screen, profile API).

Error codes are constants that map to translatable message strings.
The builder returns structured error dicts: {"code", "message", "details"}.
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Error Code Constants
# =============================================================================

INVALID_PROFILE = "INVALID_PROFILE"
VALIDATION_ERROR = "VALIDATION_ERROR"

# =============================================================================
# i18n Message Registry
#
# Maps (error_code, language) -> translated message string.
# Falls back to "en" if a translation is missing for the requested language.
# =============================================================================

_ERROR_MESSAGES: dict[str, dict[str, str]] = {
    INVALID_PROFILE: {
        "en": "Your light sensitivity answer is missing or invalid. Please choose a value from 1 to 5.",
        "de": "Deine Angabe zur Lichtempfindlichkeit fehlt oder ist ungueltig. Bitte waehle einen Wert von 1 bis 5.",
    },
    VALIDATION_ERROR: {
        "en": "The profile could not be read. Please check that it is a JSON object.",
        "de": "Das Profil konnte nicht gelesen werden. Bitte pruefe, ob es ein JSON-Objekt ist.",
    },
}

# Default fallback language
_DEFAULT_LANG = "en"


# =============================================================================
# Error Response Builder
# =============================================================================


def get_error_message(code: str, lang: str = "en") -> str:
    """
    Get a translated error message for a given error code.

    Falls back to English if the requested language is not available.
    Falls back to a generic message if the error code is unknown.

    Args:
        code: Error code constant (e.g. INVALID_PROFILE)
        lang: ISO 639-1 language code (e.g. "en", "de")

    Returns:
        Translated error message string
    """
    messages = _ERROR_MESSAGES.get(code, {})
    return messages.get(lang, messages.get(_DEFAULT_LANG, "An error occurred."))


def build_error_response(
    code: str,
    message: str | None = None,
    details: dict[str, Any] | None = None,
    lang: str = "en",
) -> dict[str, Any]:
    """
    Build a structured error response dict.

    If no message is provided, the i18n-translated message for the error code
    and language is used automatically.

    Args:
        code: Error code constant
        message: Optional override message (bypasses i18n lookup)
        details: Optional additional error details
        lang: ISO 639-1 language code for i18n message lookup

    Returns:
        Structured error dict: {"code": str, "message": str, "details": dict | None}
    """
    resolved_message = message if message is not None else get_error_message(code, lang)
    error: dict[str, Any] = {
        "code": code,
        "message": resolved_message,
    }
    if details is not None:
        error["details"] = details
    return error


__all__ = [
    "INVALID_PROFILE",
    "VALIDATION_ERROR",
    "get_error_message",
    "build_error_response",
]
