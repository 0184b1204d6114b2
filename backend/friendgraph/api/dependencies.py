"""Request Dependencies — per-request wiring of store, managers and deadline.

Invariants:
    - One AsyncSession per request (FastAPI caches get_db within a request), so
      every manager in a request shares the same transaction
    - Managers are constructed per request; nothing here is process-global
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from friendgraph.config import get_settings
from friendgraph.infrastructure.database import get_db
from friendgraph.infrastructure.graph_store import SqlGraphStore
from friendgraph.services.friendship_manager import FriendshipManager
from friendgraph.services.recipient_resolver import RecipientResolver
from friendgraph.services.subscription_manager import SubscriptionManager
from friendgraph.services.user_directory import UserDirectory


def get_graph_store(db: AsyncSession = Depends(get_db)) -> SqlGraphStore:
    return SqlGraphStore(db)


def get_user_directory(
    store: SqlGraphStore = Depends(get_graph_store),
) -> UserDirectory:
    return UserDirectory(store)


def get_friendship_manager(
    store: SqlGraphStore = Depends(get_graph_store),
) -> FriendshipManager:
    return FriendshipManager(store)


def get_subscription_manager(
    store: SqlGraphStore = Depends(get_graph_store),
) -> SubscriptionManager:
    return SubscriptionManager(store)


def get_recipient_resolver(
    store: SqlGraphStore = Depends(get_graph_store),
) -> RecipientResolver:
    return RecipientResolver(store)


def get_request_timeout() -> float:
    """Deadline (seconds) applied to each service call."""
    return get_settings().request_timeout_seconds
