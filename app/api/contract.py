"""Endpoint Contracts — one definition per endpoint, shared by route and client.

Invariants:
    - Route decorators and SubscribersClient read method/path from here, never literals
    - responses maps every documented status to the schema of its body
    - build_url only substitutes ":name" placeholders present in the path

Design Decisions:
    - Frozen dataclass over a dict: attribute access, immutable at runtime
    - Schemas referenced, not copied: a change to SubscriberCreate reaches both sides
"""

from dataclasses import dataclass, field

from pydantic import BaseModel

from app.schemas.subscriber import (
    MessageBody, SubscriberCreate, SubscriberResponse, ValidationErrorBody,
)


@dataclass(frozen=True)
class EndpointContract:
    """HTTP method, path, input schema, and per-status response schemas."""
    method: str
    path: str
    input: type[BaseModel]
    responses: dict[int, type[BaseModel]] = field(default_factory=dict)


SUBSCRIBERS_CREATE = EndpointContract(
    method="POST",
    path="/api/subscribers",
    input=SubscriberCreate,
    responses={
        201: SubscriberResponse,
        400: ValidationErrorBody,
        409: MessageBody,
        500: MessageBody,
    },
)


def build_url(path: str, params: dict[str, str | int] | None = None) -> str:
    """Substitute ":key" placeholders, e.g. build_url("/api/users/:id", {"id": 1})."""
    url = path
    for key, value in (params or {}).items():
        placeholder = f":{key}"
        if placeholder in url:
            url = url.replace(placeholder, str(value))
    return url
