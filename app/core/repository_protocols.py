"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - insert() raises DuplicateEmailError when the email already exists,
      even if find_by_email() missed it a moment earlier

Design Decisions:
    - Protocol over ABC: structural subtyping, the SQL repository and the test fake
      share no base class
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from app.core.domain_types import Subscriber


class SubscriberRepository(Protocol):
    """Contract for subscriber persistence — implemented by shell."""
    async def find_by_email(self, email: str) -> Subscriber | None: ...
    async def insert(self, email: str) -> Subscriber: ...
