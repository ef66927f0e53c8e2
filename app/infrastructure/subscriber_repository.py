"""SQL Subscriber Repository — SubscriberRepository over an AsyncSession.

Invariants:
    - insert() commits its own row; an IntegrityError from uq_subscribers_email
      becomes DuplicateEmailError, any other IntegrityError a DatabaseError
    - Every other SQLAlchemyError is rolled back and raised as DatabaseError
    - Returns core Subscriber dataclasses, never ORM instances

Design Decisions:
    - One commit per insert: the row is visible to concurrent lookups as soon as
      the call returns
    - IntegrityError mapped here, not in DatabaseSessionManager: only this layer
      knows which constraint it can trip
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Subscriber, SubscriberId
from app.core.errors import DatabaseError, DuplicateEmailError
from app.models.subscriber import Subscriber as SubscriberModel

# PostgreSQL names the constraint; SQLite names the column
EMAIL_UNIQUE_MARKERS = (
    "uq_subscribers_email",
    "UNIQUE constraint failed: subscribers.email",
)

logger = logging.getLogger(__name__)


class SqlSubscriberRepository:
    """Subscriber persistence backed by the subscribers table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_email(self, email: str) -> Subscriber | None:
        try:
            result = await self.db.execute(
                select(SubscriberModel).where(SubscriberModel.email == email),
            )
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Subscriber lookup failed: {e}")
            raise DatabaseError("Subscriber lookup failed", "select") from e
        row = result.scalar_one_or_none()
        return _to_domain(row) if row else None

    async def insert(self, email: str) -> Subscriber:
        row = SubscriberModel(email=email)
        self.db.add(row)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if _is_email_conflict(e):
                raise DuplicateEmailError(email) from e
            logger.error(f"Subscriber insert violated a constraint: {e}")
            raise DatabaseError("Subscriber could not be saved", "insert") from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Subscriber insert failed: {e}")
            raise DatabaseError("Subscriber could not be saved", "insert") from e
        logger.info("Subscriber created", extra={"subscriber_id": str(row.id)})
        return _to_domain(row)


def _to_domain(row: SubscriberModel) -> Subscriber:
    return Subscriber(
        id=SubscriberId(row.id), email=row.email, created_at=row.created_at,
    )


def _is_email_conflict(exc: IntegrityError) -> bool:
    if getattr(exc.orig, "constraint_name", None) == "uq_subscribers_email":
        return True
    detail = str(exc.orig)
    return any(marker in detail for marker in EMAIL_UNIQUE_MARKERS)
