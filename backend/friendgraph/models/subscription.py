"""Subscription ORM — requestor receives target's updates.

Invariants:
    - Directed: (requestor_id, target_id) is distinct from its inverse
    - UNIQUE(requestor_id, target_id): at most one active subscription per ordered pair
    - Rows are only deleted by a block between friends
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from friendgraph.db.base import Base


class Subscription(Base):
    """Directed subscription edge."""
    __tablename__ = "subscriptions"
    __table_args__ = (
        UniqueConstraint("requestor_id", "target_id", name="uq_subscriptions_pair"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    requestor_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    target_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
