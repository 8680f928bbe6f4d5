"""Inbound host message validation with strong typing."""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError
from returns.result import Failure, Result, Success

from .errors import ValidationError


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    field: str | None = None
    value: Any | None = None


class HostMessage(BaseModel):
    """Base model for messages arriving from the host."""

    model_config = ConfigDict(
        strict=True, populate_by_name=True, extra="ignore", frozen=True
    )


class FireEvent(HostMessage):
    """A press on an interactive node, addressed by its identifier."""

    button_id: str = Field(alias="buttonId", min_length=1)
    template_id: str | None = Field(default=None, alias="templateId")
    payload: Any = None


def parse_fire_event(body: Any) -> Result[FireEvent, ValidationResult]:
    """
    Parse a buttonPressed message (Result pattern version).

    Args:
        body: Raw message body delivered by the host

    Returns:
        Result holding the event or a validation error
    """
    if not isinstance(body, dict):
        return Failure(ValidationResult("Fire event must be an object", value=body))
    try:
        return Success(FireEvent.model_validate(body))
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        return Failure(ValidationResult(first.get("msg", str(e)), field=location or None, value=body))


def validate_fire_event(body: Any) -> FireEvent:
    """
    Parse a buttonPressed message, raising on malformed input.

    Raises:
        ValidationError: If the message is malformed
    """
    result = parse_fire_event(body)
    if isinstance(result, Failure):
        raise ValidationError(result.failure().message)
    return result.unwrap()
