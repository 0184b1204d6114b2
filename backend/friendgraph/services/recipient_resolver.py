"""Recipient Resolver — who is eligible to receive a notification from a sender.

Invariants:
    - Sender must exist (UserNotFoundError); every other lookup miss is silent
    - Candidates = friends ∪ subscribers ∪ resolved mentions, keyed by email
    - A candidate is dropped iff the candidate has blocked the sender; the rule is
      applied uniformly, whichever source(s) produced the candidate
    - Mentions resolve by exact email match; unresolved tokens are skipped
    - Any store failure aborts the whole resolution: no partial result

Design Decisions:
    - Impureim sandwich: fetch (async store) → merge (pure core) → filter
      (per-candidate store predicate); merging holds no IO
    - Block checks run sequentially: one AsyncSession cannot serve concurrent queries
"""

import logging

from friendgraph.core.domain_types import UserId
from friendgraph.core.extract_mentions import extract_mentions
from friendgraph.core.merge_recipients import count_by_source, merge_candidates
from friendgraph.core.repository_protocols import GraphStore
from friendgraph.services.user_directory import resolve_user

logger = logging.getLogger(__name__)


class RecipientResolver:
    """Computes the eligible recipients of a sender's message."""

    def __init__(self, store: GraphStore):
        self.store = store

    async def resolve(self, sender_email: str, text: str) -> set[str]:
        sender = await resolve_user(self.store, sender_email)
        sender_id = UserId(sender.id)

        friends = await self.store.list_friends(sender_id)
        subscribers = await self.store.list_subscribers(sender_id)
        mentioned = await self.store.get_users_by_emails(extract_mentions(text))

        candidates = merge_candidates(friends, subscribers, mentioned)

        recipients: set[str] = set()
        for email, candidate in candidates.items():
            if await self.store.is_blocked(candidate.user_id, sender_id):
                continue
            recipients.add(email)

        logger.info(
            f"Resolved {len(recipients)} recipient(s) for {sender_email}",
            extra={
                "sender": sender_email,
                "candidates": count_by_source(candidates),
                "recipients": len(recipients),
                "suppressed": len(candidates) - len(recipients),
            },
        )
        return recipients
