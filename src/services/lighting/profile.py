"""
User Profile Schema for the Lighting Policy Engine.

Validates a stored questionnaire document into an immutable UserProfile.

Contract:
- lightSensitivity is the only required answer. Missing, non-numeric or
  out-of-range scores raise InvalidProfileError.
- Every other answer is optional. Missing, null, wrongly-typed or
  unrecognised values fall back to UNSPECIFIED / empty and never raise.
- Choice answers must match their stored value exactly ("yes", not "YES").
- Tags are closed enumerations matched by their exact questionnaire
  label. Unknown tags are dropped during validation.
  primaryUsage is the exception: a location is recognised regardless of
  case, but the label is kept as submitted so that task mode can still
  require the exact "Workplace" / "School" spelling.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from src.lib.exceptions import InvalidProfileError
from src.services.lighting.sensitivity import coerce_sensitivity

logger = logging.getLogger(__name__)

# =============================================================================
# Questionnaire Answers
# =============================================================================


class Answer(StrEnum):
    """Yes / no questionnaire answer."""

    YES = "yes"
    NO = "no"
    UNSPECIFIED = "unspecified"


class NotificationPreference(StrEnum):
    """How often the user wants to hear about adjustments."""

    ALWAYS = "always"
    ONLY_SOMETIMES = "only_sometimes"
    NEVER = "never"
    UNSPECIFIED = "unspecified"


class StressAwareness(StrEnum):
    """How often the user notices their own stress building."""

    ALWAYS = "always"
    SOMETIMES = "sometimes"
    RARELY = "rarely"
    NEVER = "never"
    UNSPECIFIED = "unspecified"


class AdjustmentComfort(StrEnum):
    """Whether the user is comfortable with automatic adjustments."""

    YES = "yes"
    NO = "no"
    ONLY_IF_I_CAN_UNDO_IT = "only_if_i_can_undo_it"
    UNSPECIFIED = "unspecified"


# =============================================================================
# Questionnaire Tags
# =============================================================================


class UsageLocation(StrEnum):
    """Where the user mainly uses the lights."""

    HOME = "Home"
    SCHOOL = "School"
    WORKPLACE = "Workplace"
    CLINIC = "Clinic"
    OUTDOORS = "Outdoors"
    OTHER = "Other"


class LightType(StrEnum):
    """Light types the user finds uncomfortable."""

    FLICKERING_LIGHTS = "Flickering lights"
    BRIGHT_WHITE = "Bright white"


class LightReaction(StrEnum):
    """Physical or emotional reactions to uncomfortable light."""

    HEADACHES = "Headaches"
    NAUSEA = "Nausea"
    ANXIETY = "Anxiety"
    TROUBLE_FOCUSING = "Trouble focusing"


class CopingMethod(StrEnum):
    """What the user does when light becomes stressful."""

    TURN_OFF_LIGHTS = "Turn off lights"
    LEAVE_THE_ROOM = "Leave the room"


_CHOICE_FIELDS: dict[str, type[StrEnum]] = {
    "overwhelmed_by_light": Answer,
    "light_needs_change": Answer,
    "manual_override": Answer,
    "track_effectiveness": Answer,
    "notification_preference": NotificationPreference,
    "stress_awareness": StressAwareness,
    "comfort_with_adjustments": AdjustmentComfort,
}

_TAG_FIELDS: dict[str, type[StrEnum]] = {
    "uncomfortable_light_types": LightType,
    "light_reactions": LightReaction,
    "stress_coping_methods": CopingMethod,
}

_USAGE_LOCATION_KEYS = frozenset(member.value.lower() for member in UsageLocation)


def _as_tag_list(value: Any, field_name: str) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple, set, frozenset)):
        logger.debug("profile_tags_ignored field=%s reason=not_a_collection", field_name)
        return []
    return list(value)


# =============================================================================
# Profile
# =============================================================================


class UserProfile(BaseModel):
    """Questionnaire answers for one user (immutable).

    Accepts the stored camelCase document keys as well as snake_case
    attribute names. Keys the engine does not use are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    light_sensitivity: int
    overwhelmed_by_light: Answer = Answer.UNSPECIFIED
    # Recognised locations, spelled as submitted
    primary_usage: tuple[str, ...] = ()
    light_needs_change: Answer = Answer.UNSPECIFIED
    uncomfortable_light_types: tuple[LightType, ...] = ()
    light_reactions: tuple[LightReaction, ...] = ()
    notification_preference: NotificationPreference = NotificationPreference.UNSPECIFIED
    stress_awareness: StressAwareness = StressAwareness.UNSPECIFIED
    manual_override: Answer = Answer.UNSPECIFIED
    track_effectiveness: Answer = Answer.UNSPECIFIED
    stress_coping_methods: tuple[CopingMethod, ...] = ()
    comfort_with_adjustments: AdjustmentComfort = AdjustmentComfort.UNSPECIFIED

    @field_validator("light_sensitivity", mode="before")
    @classmethod
    def _check_sensitivity(cls, value: Any) -> int:
        return coerce_sensitivity(value)

    @field_validator(*_CHOICE_FIELDS, mode="before")
    @classmethod
    def _parse_choice(cls, value: Any, info: ValidationInfo) -> StrEnum:
        enum_type = _CHOICE_FIELDS[info.field_name]
        if isinstance(value, enum_type):
            return value
        if isinstance(value, str):
            try:
                return enum_type(value)
            except ValueError:
                pass
        if value not in (None, ""):
            logger.debug("profile_answer_ignored field=%s", info.field_name)
        return enum_type("unspecified")

    @field_validator("primary_usage", mode="before")
    @classmethod
    def _parse_usage(cls, value: Any) -> tuple[str, ...]:
        labels: list[str] = []
        ignored = 0
        for item in _as_tag_list(value, "primary_usage"):
            if not isinstance(item, str) or item.lower() not in _USAGE_LOCATION_KEYS:
                ignored += 1
                continue
            if item not in labels:
                labels.append(item)

        if ignored:
            logger.debug("profile_tags_ignored field=primary_usage count=%d", ignored)
        return tuple(labels)

    @field_validator(*_TAG_FIELDS, mode="before")
    @classmethod
    def _parse_tags(cls, value: Any, info: ValidationInfo) -> tuple[StrEnum, ...]:
        lookup = {member.value: member for member in _TAG_FIELDS[info.field_name]}

        tags: list[StrEnum] = []
        ignored = 0
        for item in _as_tag_list(value, info.field_name):
            tag = lookup.get(item) if isinstance(item, str) else None
            if tag is None:
                ignored += 1
                continue
            if tag not in tags:
                tags.append(tag)

        if ignored:
            logger.debug("profile_tags_ignored field=%s count=%d", info.field_name, ignored)
        return tuple(tags)

    @classmethod
    def from_document(cls, document: Mapping[str, Any] | UserProfile) -> UserProfile:
        """
        Build a profile from a stored questionnaire document.

        Args:
            document: Profile document as returned by the profile store
                (camelCase keys), or an existing UserProfile

        Returns:
            Validated, immutable UserProfile

        Raises:
            InvalidProfileError: If lightSensitivity is missing or invalid
        """
        if isinstance(document, UserProfile):
            return document
        if not isinstance(document, Mapping):
            logger.warning("profile_rejected reason=not_a_mapping")
            raise InvalidProfileError("profile", None, "profile document must be a mapping")

        try:
            return cls.model_validate(dict(document))
        except PydanticValidationError as exc:
            error = exc.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else "profile"
            reason = str(error["msg"]).removeprefix("Value error, ")
            logger.warning("profile_rejected field=%s reason=%s", field, reason)
            raise InvalidProfileError(field, document.get(field), reason) from exc


def tag_labels(tags: tuple[StrEnum, ...]) -> frozenset[str]:
    """Plain questionnaire labels for a tag tuple, for set lookups."""
    return frozenset(tag.value for tag in tags)


__all__ = [
    "Answer",
    "NotificationPreference",
    "StressAwareness",
    "AdjustmentComfort",
    "UsageLocation",
    "LightType",
    "LightReaction",
    "CopingMethod",
    "UserProfile",
    "tag_labels",
]
