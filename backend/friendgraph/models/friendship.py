"""Friendship ORM — undirected friendship stored as a normalized id pair.

Invariants:
    - user_low_id < user_high_id (CHECK): one row per unordered pair, no self-pairs
    - UNIQUE(user_low_id, user_high_id) is the backstop for concurrent inserts

Design Decisions:
    - Normalized pair over two mirrored rows: a single unique constraint covers both
      argument orders, so "A,B" and "B,A" collide at the database level
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Integer, DateTime, ForeignKey, UniqueConstraint, CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from friendgraph.db.base import Base


class Friendship(Base):
    """Symmetric friendship between two users."""
    __tablename__ = "friendships"
    __table_args__ = (
        UniqueConstraint("user_low_id", "user_high_id", name="uq_friendships_pair"),
        CheckConstraint("user_low_id < user_high_id", name="ck_friendships_ordered"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_low_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    user_high_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    @staticmethod
    def normalize(user_a: int, user_b: int) -> tuple[int, int]:
        """Order a pair so the smaller id comes first."""
        return (user_a, user_b) if user_a < user_b else (user_b, user_a)
