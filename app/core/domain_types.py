"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - SubscriberId wraps UUID — never use bare UUID in domain logic
    - Subscriber is frozen: a record is never mutated after creation
    - created_at is timezone-aware UTC

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Subscriber as frozen dataclass: core stays independent of the ORM model
"""

from dataclasses import dataclass
from datetime import datetime
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

SubscriberId = NewType("SubscriberId", UUID)


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class Subscriber:
    """One registered email address."""
    id: SubscriberId
    email: str
    created_at: datetime

