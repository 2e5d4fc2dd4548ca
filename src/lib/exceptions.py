"""
Custom exception hierarchy for Auxa.

All exceptions inherit from AuxaException, enabling catch-all for
Auxa-specific errors while keeping the ability to catch specific
error types.

The lighting policy engine has exactly one failure mode: a profile
whose light sensitivity score is missing, non-numeric or outside 1-5.
Every other questionnaire field degrades to a default instead of
raising.
"""

from __future__ import annotations

from typing import Any

from src.lib.errors import INVALID_PROFILE, build_error_response


class AuxaException(Exception):
    """Base exception for all Auxa errors."""


class ValidationError(AuxaException):
    """Input validation, parsing, or type conversion failures."""


class SerializationError(AuxaException):
    """JSON encode/decode, data serialization/deserialization failures."""


class InvalidProfileError(ValidationError):
    """A user profile cannot be used to derive lighting settings.

    Raised when ``lightSensitivity`` is missing, non-numeric or outside
    the 1-5 range. Fatal to the single invocation; never retried.
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid profile field {field!r}: {reason} (got {value!r})")

    def to_error_response(self, lang: str = "en") -> dict[str, Any]:
        """Build the structured error dict for API / UI collaborators."""
        return build_error_response(
            INVALID_PROFILE,
            details={"field": self.field, "reason": self.reason},
            lang=lang,
        )
