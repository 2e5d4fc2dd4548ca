"""
Lib package for Auxa.

Contains shared utilities:
- errors.py: Centralized error response builder with i18n
- exceptions.py: Exception hierarchy (AuxaException, InvalidProfileError)
- logging.py: structlog + stdlib logging setup
"""

from src.lib.errors import (
    INVALID_PROFILE,
    VALIDATION_ERROR,
    build_error_response,
    get_error_message,
)
from src.lib.exceptions import (
    AuxaException,
    InvalidProfileError,
    SerializationError,
    ValidationError,
)

__all__ = [
    # Errors
    "INVALID_PROFILE",
    "VALIDATION_ERROR",
    "get_error_message",
    "build_error_response",
    # Exceptions
    "AuxaException",
    "ValidationError",
    "SerializationError",
    "InvalidProfileError",
]
