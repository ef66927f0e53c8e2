"""Subscription Service — validate, check duplicate, insert, respond.

Invariants:
    - Stateless: the only state is the injected repository handle
    - Validation failure performs NO repository IO
    - Exactly one outcome per call: Subscriber, ValidationError, ConflictError
      or InternalError
    - DuplicateEmailError from insert() is a conflict, same as a lookup hit
    - No retries, no logging, no events (transport layer owns those)

Design Decisions:
    - find_by_email is an early exit only: the unique constraint behind insert()
      decides concurrent duplicates
    - Repository injected via constructor: routes pass the SQL repository,
      tests pass the in-memory fake
"""

from typing import Any

from app.core.domain_types import Subscriber
from app.core.errors import (
    ConflictError, DuplicateEmailError, InternalError, LandingError,
)
from app.core.repository_protocols import SubscriberRepository
from app.schemas.subscriber import parse_subscriber_create


class SubscriptionService:
    """Subscription intake over a SubscriberRepository."""

    def __init__(self, repository: SubscriberRepository):
        self.repository = repository

    async def subscribe(self, candidate: Any) -> Subscriber:
        """Register candidate["email"]. Raises a LandingError subclass on failure."""
        email = parse_subscriber_create(candidate).email
        try:
            if await self.repository.find_by_email(email) is not None:
                raise ConflictError()
            return await self.repository.insert(email)
        except DuplicateEmailError as e:
            raise ConflictError() from e
        except LandingError:
            raise
        except Exception as e:
            raise InternalError() from e
