"""In-memory SubscriberRepository fakes — substitutes for the SQL repository.

Invariants:
    - InMemorySubscriberRepository.insert is an atomic insert-if-absent:
      no await between the membership check and the write
    - Every method yields to the event loop once, so concurrent subscribe
      calls interleave between lookup and insert like real IO would
    - Call counters let tests assert that no IO happened

Design Decisions:
    - Flat classes satisfying the Protocol structurally (no inheritance from SQL repo)
"""

import asyncio
from datetime import datetime, timezone
from uuid import uuid4

from app.core.domain_types import Subscriber, SubscriberId
from app.core.errors import DuplicateEmailError


class InMemorySubscriberRepository:
    """Dict-backed store keyed by email."""

    def __init__(self):
        self.records: dict[str, Subscriber] = {}
        self.lookups = 0
        self.inserts = 0

    async def find_by_email(self, email: str) -> Subscriber | None:
        self.lookups += 1
        await asyncio.sleep(0)
        return self.records.get(email)

    async def insert(self, email: str) -> Subscriber:
        self.inserts += 1
        await asyncio.sleep(0)
        if email in self.records:
            raise DuplicateEmailError(email)
        subscriber = Subscriber(
            id=SubscriberId(uuid4()),
            email=email,
            created_at=datetime.now(timezone.utc),
        )
        self.records[email] = subscriber
        return subscriber


class LookupBlindRepository(InMemorySubscriberRepository):
    """Lookup always misses — only the insert-time constraint can catch duplicates."""

    async def find_by_email(self, email: str) -> Subscriber | None:
        self.lookups += 1
        return None


class UnavailableRepository:
    """Every call fails as if the store were down."""

    def __init__(self, exc: Exception | None = None):
        self.exc = exc or ConnectionError("store unavailable")

    async def find_by_email(self, email: str) -> Subscriber | None:
        raise self.exc

    async def insert(self, email: str) -> Subscriber:
        raise self.exc
