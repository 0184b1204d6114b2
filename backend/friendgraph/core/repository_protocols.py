"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - create_* methods are atomic insert-if-absent: a duplicate raises the
      matching Already*Error, never a driver-level integrity error
    - Any persistence failure surfaces as StoreError naming the operation

Design Decisions:
    - Protocol over ABC: structural subtyping, the ORM User and test fakes both fit
    - Async in Protocol: implementations do IO; the pure helpers that consume the
      results (extract_mentions, merge_candidates) stay synchronous
    - Narrow capability set: the managers never see query construction details
"""

from typing import Protocol

from friendgraph.core.domain_types import UserId


class UserLike(Protocol):
    """Structural contract for user records returned by the store."""
    id: int
    email: str


class GraphStore(Protocol):
    """Contract for user and relationship persistence — implemented by shell."""

    # Users
    async def get_user_by_email(self, email: str) -> UserLike | None: ...
    async def get_users_by_emails(self, emails: list[str]) -> list[UserLike]: ...
    async def create_user(self, email: str) -> UserLike: ...

    # Reads
    async def list_friends(self, user_id: UserId) -> list[UserLike]: ...
    async def list_subscribers(self, user_id: UserId) -> list[UserLike]: ...
    async def are_friends(self, user_a: UserId, user_b: UserId) -> bool: ...
    async def is_blocked(self, target_id: UserId, sender_id: UserId) -> bool: ...

    # Writes
    async def create_friendship(self, user_a: UserId, user_b: UserId) -> None: ...
    async def create_subscription(
        self, requestor_id: UserId, target_id: UserId,
    ) -> None: ...
    async def create_block(self, requestor_id: UserId, target_id: UserId) -> None: ...
    async def delete_subscription(
        self, requestor_id: UserId, target_id: UserId,
    ) -> bool: ...
