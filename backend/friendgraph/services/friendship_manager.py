"""Friendship Manager — creates friendships and answers friend-list queries.

Invariants:
    - Both emails must resolve before anything is written (UserNotFoundError otherwise)
    - A friendship with oneself is rejected (InvalidRelationshipError)
    - Duplicate friendship in either argument order raises AlreadyFriendsError;
      the atomic check-and-insert lives in the store, not here
    - list_common_friends is symmetric and deduplicated (set intersection)

Design Decisions:
    - Email lists returned sorted: the relation is a set, sorting only makes
      responses stable
"""

import logging

from friendgraph.core.errors import InvalidRelationshipError
from friendgraph.core.repository_protocols import GraphStore
from friendgraph.core.domain_types import UserId
from friendgraph.services.user_directory import resolve_user

logger = logging.getLogger(__name__)


class FriendshipManager:
    """Friendship creation and friend/common-friend listing."""

    def __init__(self, store: GraphStore):
        self.store = store

    async def create_friendship(self, email_a: str, email_b: str) -> None:
        """Connect two users as friends."""
        if email_a == email_b:
            raise InvalidRelationshipError("A user cannot befriend themselves")
        user_a = await resolve_user(self.store, email_a)
        user_b = await resolve_user(self.store, email_b)
        await self.store.create_friendship(UserId(user_a.id), UserId(user_b.id))
        logger.info(f"Friendship created: {email_a} <-> {email_b}")

    async def list_friends(self, email: str) -> list[str]:
        """Emails of every friend of the user."""
        user = await resolve_user(self.store, email)
        friends = await self.store.list_friends(UserId(user.id))
        return sorted({friend.email for friend in friends})

    async def list_common_friends(self, email_a: str, email_b: str) -> list[str]:
        """Emails of users who are friends with both users."""
        friends_a = set(await self.list_friends(email_a))
        friends_b = set(await self.list_friends(email_b))
        return sorted(friends_a & friends_b)
