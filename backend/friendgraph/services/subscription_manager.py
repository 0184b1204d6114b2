"""Subscription/Block Manager — subscriptions, blocks and the block predicate.

Invariants:
    - subscribe raises AlreadySubscribedError for an existing ordered pair
    - block between friends first deletes the (requestor, target) subscription;
      the reverse (target, requestor) subscription is left alone
    - block raises AlreadyBlockedError when the ordered pair is already blocked,
      and the subscription delete is rolled back with it
    - is_blocked(target, sender) reads from the receiving side: "target blocks sender"
"""

import logging

from friendgraph.core.domain_types import UserId
from friendgraph.core.repository_protocols import GraphStore
from friendgraph.services.user_directory import resolve_user

logger = logging.getLogger(__name__)


class SubscriptionManager:
    """Subscription and block mutations plus the block lookup."""

    def __init__(self, store: GraphStore):
        self.store = store

    async def subscribe(self, requestor_email: str, target_email: str) -> None:
        """Requestor starts receiving target's updates."""
        requestor = await resolve_user(self.store, requestor_email)
        target = await resolve_user(self.store, target_email)
        await self.store.create_subscription(
            UserId(requestor.id), UserId(target.id),
        )
        logger.info(
            f"Subscription created: {requestor_email} -> {target_email}",
            extra={"requestor": requestor_email, "target": target_email},
        )

    async def block(self, requestor_email: str, target_email: str) -> bool:
        """Requestor stops receiving target's updates.

        Returns True when a forward subscription was removed as a side effect.
        """
        requestor = await resolve_user(self.store, requestor_email)
        target = await resolve_user(self.store, target_email)
        requestor_id, target_id = UserId(requestor.id), UserId(target.id)

        removed = False
        if await self.store.are_friends(requestor_id, target_id):
            removed = await self.store.delete_subscription(requestor_id, target_id)
        await self.store.create_block(requestor_id, target_id)
        logger.info(
            f"Block created: {requestor_email} -> {target_email}"
            f" (subscription removed: {removed})",
            extra={"requestor": requestor_email, "target": target_email},
        )
        return removed

    async def is_blocked(self, target_email: str, sender_email: str) -> bool:
        """Whether target has blocked updates from sender."""
        target = await resolve_user(self.store, target_email)
        sender = await resolve_user(self.store, sender_email)
        return await self.store.is_blocked(UserId(target.id), UserId(sender.id))
