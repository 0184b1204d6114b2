"""User ORM — the identity every relationship row points at.

Invariants:
    - id is an autoincrement integer primary key
    - email is unique and stored verbatim (lookups are exact-match)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from friendgraph.db.base import Base


class User(Base):
    """Registered user, addressed externally by email."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(
        String(254), nullable=False, unique=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email!r})"
