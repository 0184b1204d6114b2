"""Recipient Merging — unions the three candidate sources into one email-keyed map.

Invariants:
    - Dedup key is the email string (exact equality)
    - A user present in several sources appears once, with every source recorded
    - First-seen order is friends, then subscribers, then mentions
    - Pure: no IO, no block filtering (the resolver applies the predicate)
"""

from dataclasses import dataclass, field

from friendgraph.core.domain_types import RecipientSource, UserId
from friendgraph.core.repository_protocols import UserLike


@dataclass
class Candidate:
    """A prospective notification recipient and the sources that produced it."""
    user_id: UserId
    email: str
    sources: set[RecipientSource] = field(default_factory=set)


def merge_candidates(
    friends: list[UserLike],
    subscribers: list[UserLike],
    mentioned: list[UserLike],
) -> dict[str, Candidate]:
    """Union friends, subscribers and mentioned users keyed by email."""
    merged: dict[str, Candidate] = {}
    for source, users in (
        (RecipientSource.FRIEND, friends),
        (RecipientSource.SUBSCRIBER, subscribers),
        (RecipientSource.MENTION, mentioned),
    ):
        for user in users:
            candidate = merged.get(user.email)
            if candidate is None:
                candidate = Candidate(user_id=UserId(user.id), email=user.email)
                merged[user.email] = candidate
            candidate.sources.add(source)
    return merged


def count_by_source(candidates: dict[str, Candidate]) -> dict[str, int]:
    """Per-source candidate counts for logging (a candidate counts once per source)."""
    counts = {source.value: 0 for source in RecipientSource}
    for candidate in candidates.values():
        for source in candidate.sources:
            counts[source.value] += 1
    return counts
