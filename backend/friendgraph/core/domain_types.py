"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the integer primary key; emails stay plain str, compared verbatim
    - All relation and recipient-source kinds encoded as Enums

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON/log fields without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Enums ───────────────────────────────────────────────────────

class RelationKind(str, Enum):
    """Relationship facts persisted by the GraphStore."""
    FRIENDSHIP = "friendship"        # unordered pair
    SUBSCRIPTION = "subscription"    # requestor -> target
    BLOCK = "block"                  # requestor -> target


class RecipientSource(str, Enum):
    """Where a notification candidate came from."""
    FRIEND = "friend"
    SUBSCRIBER = "subscriber"
    MENTION = "mention"
