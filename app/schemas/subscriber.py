"""Subscriber Schemas — request and response shapes for subscription intake.

Invariants:
    - SubscriberCreate.email passes core/email_rule.normalize_email and holds
      its normalized form afterwards
    - Extra request fields are ignored, never rejected
    - SubscriberResponse serializes created_at as "createdAt"

Design Decisions:
    - PydanticCustomError in the validator: the message reaches the caller verbatim,
      without pydantic's "Value error, " prefix
    - parse_subscriber_create is the single entry point for both sides: the
      service and SubscribersClient report the same message and field
    - Non-object payloads get a fixed message: pydantic's own text names the
      schema class
    - Error body schemas live here too so client and server parse the same shapes
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from app.core.domain_types import Subscriber
from app.core.email_rule import normalize_email
from app.core.errors import ValidationError

NOT_AN_OBJECT_MESSAGE = "Request body must be a JSON object"
OBJECT_ERROR_TYPES = ("model_type", "model_attributes_type", "dict_type")


class SubscriberCreate(BaseModel):
    """Subscription request — a single email field."""
    model_config = ConfigDict(extra="ignore")

    email: str

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        try:
            return normalize_email(v)
        except ValueError as e:
            raise PydanticCustomError("invalid_email", str(e)) from e


def parse_subscriber_create(candidate: Any) -> SubscriberCreate:
    """Validate an untrusted payload. Raises ValidationError naming the first bad field."""
    try:
        return SubscriberCreate.model_validate(candidate)
    except PydanticValidationError as e:
        first = e.errors()[0]
        if first["type"] in OBJECT_ERROR_TYPES and not first["loc"]:
            raise ValidationError(NOT_AN_OBJECT_MESSAGE) from e
        field = ".".join(str(loc) for loc in first["loc"]) or None
        raise ValidationError(first["msg"], field) from e


class SubscriberResponse(BaseModel):
    """Created subscriber — public-facing record."""
    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    email: str
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_domain(cls, subscriber: Subscriber) -> "SubscriberResponse":
        return cls(
            id=subscriber.id,
            email=subscriber.email,
            created_at=subscriber.created_at,
        )


# --- Error bodies -------------------------------------------------------------

class MessageBody(BaseModel):
    """Error body for conflict and internal failures."""
    message: str


class ValidationErrorBody(MessageBody):
    """Error body for malformed input — names the failing field when known."""
    field: str | None = None
