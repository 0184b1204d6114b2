"""SQL Graph Store — SQLAlchemy implementation of the GraphStore protocol.

Invariants:
    - Operates inside the caller's AsyncSession; never commits (the request does)
    - create_* is insert-if-absent: existence check and insert share the request
      transaction, and the unique constraint is the backstop for concurrent inserts
    - A unique-constraint violation on insert rolls the transaction back and raises
      the matching Already*Error, identical to the error the existence check raises
    - Every other SQLAlchemyError, including foreign-key and check violations,
      becomes StoreError carrying the operation name

Design Decisions:
    - Flush after add: surfaces the unique violation inside the store method so it
      can be translated, instead of at commit time in the route
    - Whole-transaction rollback over SAVEPOINT: the request fails anyway, and a
      block's subscription delete must be undone together with the failed insert
    - Friend lists ordered by email: deterministic output for logs and tests
"""

import functools
import logging

from sqlalchemy import select, delete, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from friendgraph.core.domain_types import RelationKind, UserId
from friendgraph.core.errors import (
    AlreadyBlockedError,
    AlreadyFriendsError,
    AlreadySubscribedError,
    ErrorContext,
    StoreError,
    UserAlreadyExistsError,
)
from friendgraph.models.block import Block
from friendgraph.models.friendship import Friendship
from friendgraph.models.subscription import Subscription
from friendgraph.models.user import User

logger = logging.getLogger(__name__)

_CONFLICT_ERRORS = {
    RelationKind.FRIENDSHIP: AlreadyFriendsError,
    RelationKind.SUBSCRIPTION: AlreadySubscribedError,
    RelationKind.BLOCK: AlreadyBlockedError,
}

# PostgreSQL unique_violation
_UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """True when the driver reports a unique-constraint violation."""
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == _UNIQUE_VIOLATION_SQLSTATE
    # SQLite carries no SQLSTATE, only the message
    return "UNIQUE constraint failed" in str(orig)


def _store_operation(operation: str):
    """Map SQLAlchemy failures inside a store method to StoreError(operation)."""
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            try:
                return await func(self, *args, **kwargs)
            except SQLAlchemyError as e:
                logger.error(
                    f"Store operation {operation} failed: {e}",
                    extra={"operation": operation},
                )
                raise StoreError("Database operation failed", operation) from e
        return wrapper
    return decorator


class SqlGraphStore:
    """GraphStore backed by the users/friendships/subscriptions/blocks tables."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Users ───────────────────────────────────────────────────

    @_store_operation("get_user_by_email")
    async def get_user_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    @_store_operation("get_users_by_emails")
    async def get_users_by_emails(self, emails: list[str]) -> list[User]:
        if not emails:
            return []
        result = await self.db.execute(
            select(User).where(User.email.in_(emails)).order_by(User.email),
        )
        return list(result.scalars().all())

    @_store_operation("create_user")
    async def create_user(self, email: str) -> User:
        if await self.get_user_by_email(email) is not None:
            raise UserAlreadyExistsError(email)
        user = User(email=email)
        self.db.add(user)
        try:
            await self.db.flush()
        except IntegrityError as e:
            await self.db.rollback()
            if not is_unique_violation(e):
                raise
            raise UserAlreadyExistsError(email)
        return user

    # ─── Reads ───────────────────────────────────────────────────

    @_store_operation("list_friends")
    async def list_friends(self, user_id: UserId) -> list[User]:
        as_low = select(Friendship.user_high_id).where(
            Friendship.user_low_id == user_id,
        )
        as_high = select(Friendship.user_low_id).where(
            Friendship.user_high_id == user_id,
        )
        result = await self.db.execute(
            select(User)
            .where(or_(User.id.in_(as_low), User.id.in_(as_high)))
            .order_by(User.email),
        )
        return list(result.scalars().all())

    @_store_operation("list_subscribers")
    async def list_subscribers(self, user_id: UserId) -> list[User]:
        result = await self.db.execute(
            select(User)
            .join(Subscription, Subscription.requestor_id == User.id)
            .where(Subscription.target_id == user_id)
            .order_by(User.email),
        )
        return list(result.scalars().all())

    @_store_operation("are_friends")
    async def are_friends(self, user_a: UserId, user_b: UserId) -> bool:
        low, high = Friendship.normalize(user_a, user_b)
        result = await self.db.execute(
            select(Friendship.id).where(
                Friendship.user_low_id == low, Friendship.user_high_id == high,
            ),
        )
        return result.scalar_one_or_none() is not None

    @_store_operation("is_blocked")
    async def is_blocked(self, target_id: UserId, sender_id: UserId) -> bool:
        result = await self.db.execute(
            select(Block.id).where(
                Block.requestor_id == target_id, Block.target_id == sender_id,
            ),
        )
        return result.scalar_one_or_none() is not None

    async def _subscription_exists(
        self, requestor_id: UserId, target_id: UserId,
    ) -> bool:
        result = await self.db.execute(
            select(Subscription.id).where(
                Subscription.requestor_id == requestor_id,
                Subscription.target_id == target_id,
            ),
        )
        return result.scalar_one_or_none() is not None

    # ─── Writes ──────────────────────────────────────────────────

    async def _insert_once(
        self, kind: RelationKind, row, exists: bool, operation: str,
    ) -> None:
        """Insert row unless exists; translate a unique violation to the conflict error."""
        conflict = _CONFLICT_ERRORS[kind]
        if exists:
            raise conflict(ErrorContext(operation=operation))
        self.db.add(row)
        try:
            await self.db.flush()
        except IntegrityError as e:
            await self.db.rollback()
            if not is_unique_violation(e):
                raise
            logger.warning(
                f"Concurrent {kind.value} insert lost the race",
                extra={"operation": operation},
            )
            raise conflict(ErrorContext(operation=operation))

    @_store_operation("create_friendship")
    async def create_friendship(self, user_a: UserId, user_b: UserId) -> None:
        low, high = Friendship.normalize(user_a, user_b)
        await self._insert_once(
            RelationKind.FRIENDSHIP,
            Friendship(user_low_id=low, user_high_id=high),
            await self.are_friends(user_a, user_b),
            "create_friendship",
        )

    @_store_operation("create_subscription")
    async def create_subscription(
        self, requestor_id: UserId, target_id: UserId,
    ) -> None:
        await self._insert_once(
            RelationKind.SUBSCRIPTION,
            Subscription(requestor_id=requestor_id, target_id=target_id),
            await self._subscription_exists(requestor_id, target_id),
            "create_subscription",
        )

    @_store_operation("create_block")
    async def create_block(self, requestor_id: UserId, target_id: UserId) -> None:
        await self._insert_once(
            RelationKind.BLOCK,
            Block(requestor_id=requestor_id, target_id=target_id),
            await self.is_blocked(requestor_id, target_id),
            "create_block",
        )

    @_store_operation("delete_subscription")
    async def delete_subscription(
        self, requestor_id: UserId, target_id: UserId,
    ) -> bool:
        result = await self.db.execute(
            delete(Subscription).where(
                Subscription.requestor_id == requestor_id,
                Subscription.target_id == target_id,
            ),
        )
        return result.rowcount > 0
