"""Subscriber ORM — persists one registered email address.

Invariants:
    - id is UUID primary key (client-side uuid4 default)
    - email is non-nullable and UNIQUE (uq_subscribers_email): this constraint,
      not the service's lookup, decides concurrent duplicate inserts
    - created_at set once on insert, never updated

Design Decisions:
    - Named unique constraint: matches alembic migration 001, so integrity errors
      are attributable to the email column
    - String(320): RFC 5321 maximum path length for an address
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Subscriber(Base):
    """Subscriber entity — one row per email."""
    __tablename__ = "subscribers"
    __table_args__ = (
        UniqueConstraint("email", name="uq_subscribers_email"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
