"""ORM Models — SQLAlchemy declarative models for users and relationship facts.

Invariants:
    - All models inherit from Base (db/base.py)
    - Relationship rows reference users by integer id, never by email

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or Alembic autogenerate runs
"""

from friendgraph.models.user import User  # noqa: F401
from friendgraph.models.friendship import Friendship  # noqa: F401
from friendgraph.models.subscription import Subscription  # noqa: F401
from friendgraph.models.block import Block  # noqa: F401
