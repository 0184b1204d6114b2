"""User Directory — email to user resolution and explicit registration.

Invariants:
    - resolve_user raises UserNotFoundError for unknown emails (never returns None)
    - Emails are matched verbatim
"""

import logging

from friendgraph.core.errors import UserNotFoundError
from friendgraph.core.repository_protocols import GraphStore, UserLike

logger = logging.getLogger(__name__)


async def resolve_user(store: GraphStore, email: str) -> UserLike:
    """Look up a user by email or raise UserNotFoundError."""
    user = await store.get_user_by_email(email)
    if user is None:
        raise UserNotFoundError(email)
    return user


class UserDirectory:
    """Registers users so they can take part in relationships."""

    def __init__(self, store: GraphStore):
        self.store = store

    async def register(self, email: str) -> UserLike:
        user = await self.store.create_user(email)
        logger.info(f"Registered user {email}")
        return user
