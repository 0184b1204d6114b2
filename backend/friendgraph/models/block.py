"""Block ORM — requestor refuses target's updates.

Invariants:
    - Directed, independent of friendship/subscription rows
    - UNIQUE(requestor_id, target_id): double blocking is a conflict, not a second row
    - Suppression is applied at resolution time, never by deleting friendships

Design Decisions:
    - Self-blocks are representable (no CHECK): the resolver treats them like any block
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from friendgraph.db.base import Base


class Block(Base):
    """Directed block edge."""
    __tablename__ = "blocks"
    __table_args__ = (
        UniqueConstraint("requestor_id", "target_id", name="uq_blocks_pair"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    requestor_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    target_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
